from __future__ import annotations

import enum

from sqlalchemy import Enum


class UserRole(str, enum.Enum):
    CANDIDATE = "candidate"
    EMPLOYER = "employer"


class JobType(str, enum.Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    REMOTE = "Remote"


class ApplicationStatus(str, enum.Enum):
    PENDING = "Pending"
    REVIEWED = "Reviewed"
    INTERVIEW = "Interview"
    REJECTED = "Rejected"
    ACCEPTED = "Accepted"


def enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


def enum_column_type(enum_cls: type[enum.Enum], length: int = 32) -> Enum:
    # Stored as VARCHAR + CHECK so adding a member never needs a native ENUM migration.
    return Enum(
        enum_cls,
        native_enum=False,
        length=length,
        values_callable=enum_values,
        validate_strings=True,
        name=f"{enum_cls.__name__.lower()}_enum",
    )
