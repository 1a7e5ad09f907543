"""
Result types returned by the validation pipeline.

Every call produces exactly one of:
  - `ValidationSuccess`: the number is well formed, dated and checksummed.
  - `ValidationFailure`: a fixed `FailureKind` plus its display message.

Both are frozen dataclasses exposing `valid` so callers can branch uniformly,
and `to_dict()` for the JSON shape served by the adapters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, Union


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class Citizenship(str, Enum):
    CITIZEN = "SA Citizen"
    PERMANENT_RESIDENT = "Permanent Resident"


class FailureKind(str, Enum):
    FORMAT = "format"
    DATE = "date"
    CHECKSUM = "checksum"
    INTERNAL = "internal"


# Display messages are part of the public contract; keep them stable.
FAILURE_MESSAGES: Dict[FailureKind, str] = {
    FailureKind.FORMAT: "Invalid ID format: must be exactly 13 digits",
    FailureKind.DATE: "Invalid birth date in ID",
    FailureKind.CHECKSUM: "Invalid check digit (Luhn validation failed)",
    FailureKind.INTERNAL: "Validation error: unable to process ID number",
}


@dataclass(frozen=True)
class IdComponents:
    """Raw numeric fields sliced out of a validated number."""
    birth_year: int
    birth_month: int
    birth_day: int
    gender_code: int
    citizenship_code: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "birth_year": self.birth_year,
            "birth_month": self.birth_month,
            "birth_day": self.birth_day,
            "gender_code": self.gender_code,
            "citizenship_code": self.citizenship_code,
        }


@dataclass(frozen=True)
class ValidationSuccess:
    id_number: str
    date_of_birth: date
    gender: Gender
    citizenship: Citizenship
    check_digit: str
    components: IdComponents
    valid: bool = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": True,
            "id_number": self.id_number,
            "date_of_birth": self.date_of_birth.isoformat(),
            "gender": self.gender.value,
            "citizenship": self.citizenship.value,
            "check_digit": self.check_digit,
            "components": self.components.to_dict(),
        }


@dataclass(frozen=True)
class ValidationFailure:
    kind: FailureKind
    valid: bool = field(default=False, init=False)

    @property
    def error(self) -> str:
        return FAILURE_MESSAGES[self.kind]

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": False, "error": self.error}


ValidationResult = Union[ValidationSuccess, ValidationFailure]
