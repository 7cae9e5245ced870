# __init__.py
from jobboard.schemas.application import (
	ApplicationCreate,
	ApplicationRead,
	ApplicationStatusUpdate,
	ApplicationWithJob,
	MyApplicationsResponse,
)
from jobboard.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from jobboard.schemas.job import JobCreate, JobDetail, JobListItem, JobListResponse, JobRead, JobUpdate, MessageResponse, Pagination
from jobboard.schemas.user import OwnerSummary, TokenData, UserPublic

__all__ = [
	"ApplicationCreate",
	"ApplicationRead",
	"ApplicationStatusUpdate",
	"ApplicationWithJob",
	"MyApplicationsResponse",
	"AuthResponse",
	"LoginRequest",
	"RegisterRequest",
	"JobCreate",
	"JobDetail",
	"JobListItem",
	"JobListResponse",
	"JobRead",
	"JobUpdate",
	"MessageResponse",
	"Pagination",
	"OwnerSummary",
	"TokenData",
	"UserPublic",
]
