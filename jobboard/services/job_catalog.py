"""Job postings: public listing/search and owner-only mutation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from sqlalchemy import false, func, or_
from sqlalchemy.orm import Query, Session, joinedload

from jobboard.errors import ForbiddenError, NotFoundError
from jobboard.models.application import Application
from jobboard.models.enums import JobType, enum_values
from jobboard.models.jobs import Job
from jobboard.services.validation import parse_id, validate_job_fields


logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
# Keeps (page - 1) * limit within a signed 64-bit OFFSET.
MAX_PAGE_VALUE = 2**31 - 1

JOB_FIELDS = ("title", "company", "location", "type", "salary", "description")


def coerce_positive_int(value: Any, default: int, maximum: int = MAX_PAGE_VALUE) -> int:
    """Parse a query-string number; absent, non-numeric or < 1 falls back to `default`.

    Values above `maximum` are clamped to it.
    """

    if value is None or isinstance(value, bool):
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    if parsed < 1:
        return default
    return min(parsed, maximum)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _contains(column, term: str):
    return column.ilike(f"%{_escape_like(term)}%", escape="\\")


@dataclass(frozen=True)
class JobFilters:
    search: str | None = None
    type: str | None = None
    location: str | None = None

    def apply(self, query: Query) -> Query:
        if self.search:
            query = query.filter(or_(_contains(Job.title, self.search), _contains(Job.company, self.search)))
        if self.type:
            # Exact match; an unknown type simply matches nothing.
            if self.type in enum_values(JobType):
                query = query.filter(Job.type == JobType(self.type))
            else:
                query = query.filter(false())
        if self.location:
            query = query.filter(_contains(Job.location, self.location))
        return query


@dataclass
class JobPage:
    page: int
    limit: int
    total: int
    items: list[tuple[Job, int]] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)


class JobCatalog:
    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self, filters: JobFilters, page: Any = None, limit: Any = None) -> JobPage:
        page = coerce_positive_int(page, DEFAULT_PAGE)
        limit = coerce_positive_int(limit, DEFAULT_LIMIT)

        total = filters.apply(self.db.query(Job)).count()

        counts = (
            self.db.query(Application.job_id.label("job_id"), func.count(Application.id).label("application_count"))
            .group_by(Application.job_id)
            .subquery()
        )
        query = (
            self.db.query(Job, func.coalesce(counts.c.application_count, 0))
            .outerjoin(counts, counts.c.job_id == Job.id)
            .options(joinedload(Job.user))
        )
        rows = (
            filters.apply(query)
            .order_by(Job.created_at.desc(), Job.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return JobPage(page=page, limit=limit, total=total, items=[(job, int(count)) for job, count in rows])

    def get(self, job_id: Any) -> Job:
        job_id = parse_id(job_id)
        job = None
        if job_id is not None:
            job = self.db.query(Job).options(joinedload(Job.user)).filter(Job.id == job_id).first()
        if job is None:
            raise NotFoundError("Job not found")
        return job

    def _get_owned(self, job_id: Any, caller_id: int) -> Job:
        # Existence is checked before ownership: a missing job is always a 404.
        job_id = parse_id(job_id)
        job = None
        if job_id is not None:
            job = self.db.query(Job).filter(Job.id == job_id).first()
        if job is None:
            raise NotFoundError("Job not found")
        if job.user_id != caller_id:
            raise ForbiddenError("Forbidden")
        return job

    def create(self, data: Mapping[str, Any], caller_id: int) -> Job:
        validate_job_fields(data)
        values = {name: data.get(name) for name in JOB_FIELDS}
        values["type"] = JobType(values["type"])
        job = Job(**values, user_id=caller_id)
        self.db.add(job)
        self.db.commit()
        self.db.refresh(job)
        logger.info("jobs.create job_id=%s user_id=%s", job.id, caller_id)
        return job

    def update(self, job_id: Any, data: Mapping[str, Any], caller_id: int) -> Job:
        job = self._get_owned(job_id, caller_id)
        validate_job_fields(data, partial=True)
        for name in JOB_FIELDS:
            if name not in data:
                continue
            value = data[name]
            setattr(job, name, JobType(value) if name == "type" else value)
        self.db.commit()
        self.db.refresh(job)
        logger.info("jobs.update job_id=%s fields=%s", job.id, sorted(k for k in data if k in JOB_FIELDS))
        return job

    def delete(self, job_id: Any, caller_id: int) -> dict[str, str]:
        job = self._get_owned(job_id, caller_id)
        deleted_id = job.id
        self.db.delete(job)
        self.db.commit()
        logger.info("jobs.delete job_id=%s user_id=%s", deleted_id, caller_id)
        return {"message": "Job deleted successfully"}
