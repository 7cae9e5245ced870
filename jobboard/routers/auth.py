# auth.py
from fastapi import APIRouter, Depends, status

from jobboard.routers.dependencies import get_credential_service
from jobboard.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from jobboard.services.credential_service import CredentialService


router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    user_in: RegisterRequest,
    service: CredentialService = Depends(get_credential_service),
) -> AuthResponse:
    return service.register(user_in.model_dump(exclude_unset=True))


@router.post("/login", response_model=AuthResponse)
def login_user(
    user_in: LoginRequest,
    service: CredentialService = Depends(get_credential_service),
) -> AuthResponse:
    return service.login(user_in.model_dump(exclude_unset=True))
