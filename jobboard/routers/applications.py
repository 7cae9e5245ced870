# applications.py
from typing import Optional

from fastapi import APIRouter, Body, Depends, status

from jobboard.routers.dependencies import get_application_workflow, get_current_user
from jobboard.schemas.application import (
    ApplicationCreate,
    ApplicationRead,
    ApplicationStatusUpdate,
    ApplicationWithJob,
    MyApplicationsResponse,
)
from jobboard.schemas.user import TokenData
from jobboard.services.application_workflow import ApplicationWorkflow


router = APIRouter()


@router.get("/my", response_model=MyApplicationsResponse, summary="List my applications")
def list_my_applications(
    workflow: ApplicationWorkflow = Depends(get_application_workflow),
    current_user: TokenData = Depends(get_current_user),
) -> MyApplicationsResponse:
    applications = [ApplicationWithJob.model_validate(a) for a in workflow.list_mine(current_user.id)]
    return MyApplicationsResponse(count=len(applications), applications=applications)


@router.post(
    "/{job_id}",
    response_model=ApplicationWithJob,
    status_code=status.HTTP_201_CREATED,
    summary="Apply to a job",
)
def apply_to_job(
    job_id: str,
    payload: Optional[ApplicationCreate] = Body(default=None),
    workflow: ApplicationWorkflow = Depends(get_application_workflow),
    current_user: TokenData = Depends(get_current_user),
) -> ApplicationWithJob:
    cover_note = payload.cover_note if payload is not None else None
    application = workflow.apply(job_id, current_user.id, cover_note)
    return ApplicationWithJob.model_validate(application)


@router.patch("/{application_id}/status", response_model=ApplicationRead, summary="Set application status")
def update_application_status(
    application_id: str,
    payload: ApplicationStatusUpdate,
    workflow: ApplicationWorkflow = Depends(get_application_workflow),
    current_user: TokenData = Depends(get_current_user),
) -> ApplicationRead:
    # No ownership check: any authenticated caller may move the status.
    application = workflow.set_status(application_id, payload.status)
    return ApplicationRead.model_validate(application)
