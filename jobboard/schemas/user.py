# user.py

from jobboard.models.enums import UserRole
from jobboard.schemas.base import APIModel


class UserPublic(APIModel):
    id: int
    name: str
    email: str
    role: UserRole


class OwnerSummary(APIModel):
    name: str
    email: str


class TokenData(APIModel):
    """Identity carried by a verified bearer token."""

    id: int
    email: str
    role: str

