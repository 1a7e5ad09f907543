"""rsaid: South African ID number validation."""

__version__ = "0.1.0"

from .engine.checksum import compute_check_digit
from .engine.pipeline import IdValidator, validate
from .engine.results import (
    Citizenship,
    FailureKind,
    Gender,
    IdComponents,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)

__all__ = [
    "__version__",
    "validate",
    "IdValidator",
    "compute_check_digit",
    "Citizenship",
    "FailureKind",
    "Gender",
    "IdComponents",
    "ValidationFailure",
    "ValidationResult",
    "ValidationSuccess",
]
