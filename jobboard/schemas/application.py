from __future__ import annotations

from datetime import datetime
from typing import Optional

from jobboard.models.enums import ApplicationStatus
from jobboard.schemas.base import APIModel
from jobboard.schemas.job import JobRead


class ApplicationCreate(APIModel):
    cover_note: Optional[str] = None


class ApplicationStatusUpdate(APIModel):
    status: Optional[str] = None


class ApplicationRead(APIModel):
    id: int
    user_id: int
    job_id: int
    cover_note: Optional[str] = None
    status: ApplicationStatus
    created_at: datetime


class ApplicationWithJob(ApplicationRead):
    job: JobRead


class MyApplicationsResponse(APIModel):
    count: int
    applications: list[ApplicationWithJob]
