# credential_service.py
import logging
from datetime import timedelta
from typing import Any, Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.config import Settings
from jobboard.errors import ConflictError, InvalidCredentialsError, InvalidTokenError
from jobboard.models.enums import UserRole
from jobboard.models.user import User
from jobboard.schemas.auth import AuthResponse
from jobboard.schemas.user import TokenData, UserPublic
from jobboard.services.validation import validate_login, validate_registration
from jobboard.utils.jwt_handler import create_access_token, decode_access_token
from jobboard.utils.password_hash import hash_password, verify_password


logger = logging.getLogger(__name__)


def issue_token(user: User, settings: Settings) -> str:
    claims = {
        "sub": str(user.id),
        "id": user.id,
        "email": user.email,
        "role": UserRole(user.role).value,
    }
    expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    return create_access_token(
        claims,
        expires_delta,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


def verify_token(token: str, settings: Settings) -> TokenData:
    payload = decode_access_token(token, secret=settings.jwt_secret, algorithm=settings.jwt_algorithm)
    try:
        return TokenData(id=int(payload["id"]), email=str(payload["email"]), role=str(payload["role"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidTokenError("Invalid token payload") from exc


class CredentialService:
    """Account registration and login against the users table."""

    def __init__(self, db: Session, settings: Settings) -> None:
        self.db = db
        self.settings = settings

    def _get_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def _auth_response(self, user: User) -> AuthResponse:
        return AuthResponse(token=issue_token(user, self.settings), user=UserPublic.model_validate(user))

    def register(self, data: Mapping[str, Any]) -> AuthResponse:
        validate_registration(data)
        email = data["email"]
        if self._get_by_email(email) is not None:
            raise ConflictError("Email already registered")

        user = User(
            name=data["name"],
            email=email,
            password=hash_password(data["password"]),
            role=UserRole(data.get("role") or UserRole.CANDIDATE),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # Concurrent registration won the unique index on users.email.
            self.db.rollback()
            raise ConflictError("Email already registered") from exc
        self.db.refresh(user)
        logger.info("auth.register user_id=%s role=%s", user.id, user.role.value)
        return self._auth_response(user)

    def login(self, data: Mapping[str, Any]) -> AuthResponse:
        validate_login(data)
        user = self._get_by_email(data["email"])
        # Same error for unknown email and wrong password.
        if user is None or not verify_password(data["password"], user.password):
            raise InvalidCredentialsError("Invalid credentials")
        return self._auth_response(user)
