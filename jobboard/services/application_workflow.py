# application_workflow.py
import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from jobboard.errors import ConflictError, NotFoundError, ValidationError
from jobboard.models.application import Application
from jobboard.models.enums import ApplicationStatus, enum_values
from jobboard.models.jobs import Job
from jobboard.services.validation import parse_id


logger = logging.getLogger(__name__)


class ApplicationWorkflow:
    """Candidate applications: submit once per job, list own, move status."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _existing(self, job_id: int, candidate_id: int) -> Application | None:
        return (
            self.db.query(Application)
            .filter(Application.user_id == candidate_id, Application.job_id == job_id)
            .first()
        )

    def apply(self, job_id: Any, candidate_id: int, cover_note: str | None = None) -> Application:
        job_id = parse_id(job_id)
        job = None
        if job_id is not None:
            job = self.db.query(Job).filter(Job.id == job_id).first()
        if job is None:
            raise NotFoundError("Job not found")

        # Early exit only; uq_applications_user_id_job_id is what actually prevents duplicates.
        if self._existing(job_id, candidate_id) is not None:
            raise ConflictError("Already applied to this job")

        application = Application(
            user_id=candidate_id,
            job_id=job_id,
            cover_note=cover_note,
            status=ApplicationStatus.PENDING,
        )
        self.db.add(application)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.info("applications.apply duplicate job_id=%s user_id=%s", job_id, candidate_id)
            raise ConflictError("Already applied to this job") from exc
        self.db.refresh(application)
        logger.info("applications.apply application_id=%s job_id=%s user_id=%s", application.id, job_id, candidate_id)
        return application

    def list_mine(self, candidate_id: int) -> list[Application]:
        return (
            self.db.query(Application)
            .options(joinedload(Application.job))
            .filter(Application.user_id == candidate_id)
            .order_by(Application.created_at.desc(), Application.id.desc())
            .all()
        )

    def set_status(self, application_id: Any, new_status: Any) -> Application:
        # Any status may follow any other; only membership in the enum is enforced.
        if not isinstance(new_status, str) or new_status not in enum_values(ApplicationStatus):
            raise ValidationError("Invalid status")

        application_id = parse_id(application_id)
        application = None
        if application_id is not None:
            application = self.db.query(Application).filter(Application.id == application_id).first()
        if application is None:
            raise NotFoundError("Application not found")

        previous = application.status
        application.status = ApplicationStatus(new_status)
        self.db.commit()
        self.db.refresh(application)
        logger.info(
            "applications.status application_id=%s from=%s to=%s",
            application.id,
            previous.value if previous is not None else None,
            application.status.value,
        )
        return application
