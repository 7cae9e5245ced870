"""Field-by-field input checks.

Each check appends `Issue`s to a shared list instead of raising, so a caller
can report every problem in one response. `raise_for_issues` turns a non-empty
list into a `ValidationError`.
"""

from __future__ import annotations

import enum
import re
from typing import Any, Mapping

from jobboard.errors import Issue, ValidationError
from jobboard.models.enums import JobType, UserRole, enum_values


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

ID_PATTERN = re.compile(r"[0-9]+")

# Largest value a signed 64-bit INTEGER column can hold.
MAX_ID = 2**63 - 1


def _present(issues: list[Issue], data: Mapping[str, Any], field: str, *, required: bool, nullable: bool) -> bool:
    """Return True when `field` holds a value that still needs checking."""

    if field not in data:
        if required:
            issues.append(Issue(field, "Required"))
        return False
    if data[field] is None:
        if not nullable:
            issues.append(Issue(field, "Required" if required else "Expected a value, received null"))
        return False
    return True


def check_string(
    issues: list[Issue],
    data: Mapping[str, Any],
    field: str,
    *,
    min_length: int = 0,
    required: bool = True,
    nullable: bool = False,
) -> None:
    if not _present(issues, data, field, required=required, nullable=nullable):
        return
    value = data[field]
    if not isinstance(value, str):
        issues.append(Issue(field, "Expected string"))
        return
    if len(value) < min_length:
        issues.append(Issue(field, f"String must contain at least {min_length} character(s)"))


def check_email(issues: list[Issue], data: Mapping[str, Any], field: str = "email") -> None:
    before = len(issues)
    check_string(issues, data, field)
    if len(issues) == before and not EMAIL_PATTERN.match(data[field]):
        issues.append(Issue(field, "Invalid email"))


def check_choice(
    issues: list[Issue],
    data: Mapping[str, Any],
    field: str,
    enum_cls: type[enum.Enum],
    *,
    required: bool = True,
    nullable: bool = False,
) -> None:
    if not _present(issues, data, field, required=required, nullable=nullable):
        return
    value = data[field]
    if isinstance(value, enum.Enum):
        value = value.value
    allowed = enum_values(enum_cls)
    # Exact, case-sensitive match against the stored values.
    if value not in allowed:
        options = " | ".join(f"'{v}'" for v in allowed)
        issues.append(Issue(field, f"Invalid enum value. Expected {options}, received '{value}'"))


def raise_for_issues(issues: list[Issue]) -> None:
    if issues:
        raise ValidationError("Validation error", issues)


def validate_registration(data: Mapping[str, Any]) -> None:
    issues: list[Issue] = []
    check_string(issues, data, "name", min_length=2)
    check_email(issues, data)
    check_string(issues, data, "password", min_length=6)
    check_choice(issues, data, "role", UserRole, required=False, nullable=True)
    raise_for_issues(issues)


def validate_login(data: Mapping[str, Any]) -> None:
    issues: list[Issue] = []
    check_email(issues, data)
    check_string(issues, data, "password", min_length=6)
    raise_for_issues(issues)


def validate_job_fields(data: Mapping[str, Any], *, partial: bool = False) -> None:
    """Check job posting fields; with `partial=True` only supplied fields are checked."""

    required = not partial
    issues: list[Issue] = []
    check_string(issues, data, "title", min_length=2, required=required)
    check_string(issues, data, "company", min_length=2, required=required)
    check_string(issues, data, "location", min_length=2, required=required)
    check_choice(issues, data, "type", JobType, required=required)
    check_string(issues, data, "salary", required=False, nullable=True)
    check_string(issues, data, "description", min_length=10, required=required)
    raise_for_issues(issues)


def parse_id(value: Any) -> int | None:
    """Return `value` as a stored row id, or None when no row could have it."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and ID_PATTERN.fullmatch(value):
        parsed = int(value)
    else:
        return None
    return parsed if 1 <= parsed <= MAX_ID else None
