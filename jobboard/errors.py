"""Domain error taxonomy.

Services raise these; `jobboard.main` maps each one to its HTTP status and the
`{error, issues?}` response body.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Issue:
    path: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class JobBoardError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(JobBoardError):
    status_code = 400
    default_message = "Validation error"

    def __init__(self, message: str | None = None, issues: list[Issue] | None = None) -> None:
        super().__init__(message)
        self.issues = list(issues or [])

    def to_body(self) -> dict[str, Any]:
        body = super().to_body()
        if self.issues:
            body["issues"] = [issue.to_dict() for issue in self.issues]
        return body


class ConflictError(JobBoardError):
    status_code = 400
    default_message = "Conflict"


class InvalidCredentialsError(JobBoardError):
    status_code = 400
    default_message = "Invalid credentials"


class UnauthenticatedError(JobBoardError):
    status_code = 401
    default_message = "Unauthorized"


class InvalidTokenError(JobBoardError):
    status_code = 401
    default_message = "Invalid token"


class ForbiddenError(JobBoardError):
    status_code = 403
    default_message = "Forbidden"


class NotFoundError(JobBoardError):
    status_code = 404
    default_message = "Not found"


class InternalError(JobBoardError):
    status_code = 500

    def __init__(self, message: str | None = None, details: str | None = None) -> None:
        super().__init__(message)
        self.details = details

    def to_body(self) -> dict[str, Any]:
        body = super().to_body()
        if self.details is not None:
            body["details"] = self.details
        return body
