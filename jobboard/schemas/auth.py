# auth.py
from typing import Optional

from jobboard.schemas.base import APIModel
from jobboard.schemas.user import UserPublic


# Shape only; length/format rules live in jobboard.services.validation.
class RegisterRequest(APIModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class LoginRequest(APIModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(APIModel):
    token: str
    user: UserPublic
