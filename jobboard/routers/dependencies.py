# dependencies.py
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from jobboard.config import Settings
from jobboard.database import get_db
from jobboard.errors import UnauthenticatedError
from jobboard.schemas.user import TokenData
from jobboard.services.application_workflow import ApplicationWorkflow
from jobboard.services.credential_service import CredentialService, verify_token
from jobboard.services.job_catalog import JobCatalog


# auto_error=False so a missing header surfaces as our own UnauthenticatedError.
bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def authenticate(credentials: HTTPAuthorizationCredentials | None, settings: Settings) -> TokenData:
    """Resolve a bearer credential to the caller identity.

    Token claims are trusted as issued; the users table is not consulted.
    """

    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise UnauthenticatedError("Unauthorized")
    return verify_token(credentials.credentials, settings)


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
) -> TokenData:
    identity = authenticate(credentials, settings)
    request.state.user = identity
    return identity


def get_credential_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> CredentialService:
    return CredentialService(db, settings)


def get_job_catalog(db: Session = Depends(get_db)) -> JobCatalog:
    return JobCatalog(db)


def get_application_workflow(db: Session = Depends(get_db)) -> ApplicationWorkflow:
    return ApplicationWorkflow(db)
