from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from jobboard.models.enums import JobType
from jobboard.schemas.base import APIModel
from jobboard.schemas.user import OwnerSummary


class JobFields(APIModel):
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    salary: Optional[str] = None
    description: Optional[str] = None


class JobCreate(JobFields):
    pass


class JobUpdate(JobFields):
    pass


class JobRead(APIModel):
    id: int
    title: str
    company: str
    location: str
    type: JobType
    salary: Optional[str] = None
    description: str
    user_id: int
    created_at: datetime


class JobDetail(JobRead):
    user: OwnerSummary


class JobListItem(JobDetail):
    application_count: int = 0


class Pagination(APIModel):
    page: int
    limit: int
    total: int
    total_pages: int = Field(ge=0)


class JobListResponse(APIModel):
    jobs: list[JobListItem]
    pagination: Pagination


class MessageResponse(APIModel):
    message: str
