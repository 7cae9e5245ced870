# jobs.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from jobboard.routers.dependencies import get_current_user, get_job_catalog
from jobboard.schemas.job import (
    JobCreate,
    JobDetail,
    JobListItem,
    JobListResponse,
    JobRead,
    JobUpdate,
    MessageResponse,
    Pagination,
)
from jobboard.schemas.user import TokenData
from jobboard.services.job_catalog import JobCatalog, JobFilters


router = APIRouter()


@router.get("", response_model=JobListResponse, summary="List and search jobs")
def list_jobs(
    search: Optional[str] = None,
    type: Optional[str] = None,
    location: Optional[str] = None,
    # Kept as strings: non-numeric values fall back to the defaults instead of failing.
    page: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
    catalog: JobCatalog = Depends(get_job_catalog),
) -> JobListResponse:
    result = catalog.list(JobFilters(search=search, type=type, location=location), page=page, limit=limit)
    jobs = [
        JobListItem.model_validate(job).model_copy(update={"application_count": count})
        for job, count in result.items
    ]
    return JobListResponse(
        jobs=jobs,
        pagination=Pagination(
            page=result.page,
            limit=result.limit,
            total=result.total,
            total_pages=result.total_pages,
        ),
    )


# Ids stay strings here; one that cannot name a stored row is a 404, not a 400.
@router.get("/{job_id}", response_model=JobDetail, summary="Get a job by id")
def get_job(job_id: str, catalog: JobCatalog = Depends(get_job_catalog)) -> JobDetail:
    return JobDetail.model_validate(catalog.get(job_id))


@router.post("", response_model=JobRead, status_code=status.HTTP_201_CREATED, summary="Create a job")
def create_job(
    payload: JobCreate,
    catalog: JobCatalog = Depends(get_job_catalog),
    current_user: TokenData = Depends(get_current_user),
) -> JobRead:
    job = catalog.create(payload.model_dump(exclude_unset=True), current_user.id)
    return JobRead.model_validate(job)


@router.patch("/{job_id}", response_model=JobRead, summary="Update a job (owner only)")
def update_job(
    job_id: str,
    payload: JobUpdate,
    catalog: JobCatalog = Depends(get_job_catalog),
    current_user: TokenData = Depends(get_current_user),
) -> JobRead:
    job = catalog.update(job_id, payload.model_dump(exclude_unset=True), current_user.id)
    return JobRead.model_validate(job)


@router.delete("/{job_id}", response_model=MessageResponse, summary="Delete a job (owner only)")
def delete_job(
    job_id: str,
    catalog: JobCatalog = Depends(get_job_catalog),
    current_user: TokenData = Depends(get_current_user),
) -> MessageResponse:
    return MessageResponse(**catalog.delete(job_id, current_user.id))
