# __init__.py
from jobboard.models.application import Application
from jobboard.models.enums import ApplicationStatus, JobType, UserRole
from jobboard.models.jobs import Job
from jobboard.models.user import User

__all__ = [
	"Application",
	"ApplicationStatus",
	"Job",
	"JobType",
	"User",
	"UserRole",
]
