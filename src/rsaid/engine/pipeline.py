"""
Runs an ID number through normalization, shape, date and checksum checks.

Stages run strictly in order and the first failure is returned as-is:

  1) normalize     -> strip all whitespace (non-str input raises TypeError)
  2) shape         -> exactly 13 ASCII digits, else FORMAT
  3) fields/date   -> resolve century, require a real date, else DATE
  4) checksum      -> recompute check digit, else CHECKSUM

Anything unexpected raised inside stages 3-4 becomes an INTERNAL failure, so
callers only ever need to look at `result.valid` for content problems.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Union
import logging
import re

from ..config import RsaIdConfig
from .checksum import checksum_ok
from .fields import (
    RawFields,
    classify_citizenship,
    classify_gender,
    extract_fields,
    is_real_date,
    resolve_birth_year,
)
from .results import (
    FailureKind,
    IdComponents,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)

logger = logging.getLogger(__name__)

ID_LENGTH = 13
# ASCII only: str.isdigit() would also accept e.g. Arabic-Indic digits.
_ID_PATTERN = re.compile(r"[0-9]{%d}" % ID_LENGTH)
_WHITESPACE = re.compile(r"\s+")

Clock = Callable[[], date]


def normalize(value: object) -> str:
    """Remove leading, trailing and internal whitespace."""
    if not isinstance(value, str):
        raise TypeError("ID must be a string")
    return _WHITESPACE.sub("", value)


def has_valid_shape(candidate: str) -> bool:
    return _ID_PATTERN.fullmatch(candidate) is not None


class IdValidator:
    """
    Stateless validator for South African ID numbers.

    Args:
        config: Scheme rules (gender threshold, plausible age bound).
        clock:  Returns "today" for century resolution; defaults to `date.today`.
                Inject a fixed date to make results reproducible.
    """

    def __init__(self, config: Optional[RsaIdConfig] = None, clock: Optional[Clock] = None) -> None:
        self.config = config or RsaIdConfig()
        self.clock: Clock = clock or date.today

    # ---------------- Public API ----------------

    def validate(self, value: str) -> ValidationResult:
        candidate = normalize(value)

        if not has_valid_shape(candidate):
            logger.debug("id rejected: %s", FailureKind.FORMAT.value)
            return ValidationFailure(FailureKind.FORMAT)

        try:
            return self._validate_digits(candidate)
        except Exception as e:
            # The number itself is never logged.
            logger.error("unexpected %s during ID validation", type(e).__name__)
            return ValidationFailure(FailureKind.INTERNAL)

    # --------------- Internals ------------------

    def _validate_digits(self, candidate: str) -> ValidationResult:
        raw = extract_fields(candidate)

        dated = self._resolve_date(raw)
        if isinstance(dated, ValidationFailure):
            logger.debug("id rejected: %s", dated.kind.value)
            return dated

        if not checksum_ok(candidate):
            logger.debug("id rejected: %s", FailureKind.CHECKSUM.value)
            return ValidationFailure(FailureKind.CHECKSUM)

        return self._build_success(candidate, raw, dated)

    def _resolve_date(self, raw: RawFields) -> Union[date, ValidationFailure]:
        yy, month, day = int(raw.yy), int(raw.mm), int(raw.dd)
        year = resolve_birth_year(
            yy, month, day,
            today=self.clock(),
            max_age=self.config.rules.max_plausible_age,
        )
        if not is_real_date(year, month, day):
            return ValidationFailure(FailureKind.DATE)
        return date(year, month, day)

    def _build_success(self, candidate: str, raw: RawFields, born: date) -> ValidationSuccess:
        sequence, flag = int(raw.sequence), int(raw.citizenship)
        return ValidationSuccess(
            id_number=candidate,
            date_of_birth=born,
            gender=classify_gender(sequence, self.config.rules.gender_threshold),
            citizenship=classify_citizenship(flag),
            check_digit=raw.check_digit,
            components=IdComponents(
                birth_year=born.year,
                birth_month=born.month,
                birth_day=born.day,
                gender_code=sequence,
                citizenship_code=flag,
            ),
        )


_default = IdValidator()


def validate(value: str, *, today: Optional[date] = None) -> ValidationResult:
    """
    Validate an ID number with the default rules.

    Args:
        value: The ID number; surrounding and internal whitespace is ignored.
        today: Pin the reference date used for century resolution.

    Raises:
        TypeError: If `value` is not a str.
    """
    if today is None:
        return _default.validate(value)
    return IdValidator(clock=lambda: today).validate(value)
