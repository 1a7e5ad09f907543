"""
Field extraction and century resolution.

Layout of a normalized number (YYMMDDSSSSCAZ):

    offset  width  field
    0       2      year of century
    2       2      month
    4       2      day
    6       4      sequence number (gender)
    10      1      citizenship flag
    11      1      legacy field, ignored
    12      1      check digit

The two-digit year does not encode its century. `resolve_birth_year` picks the
century that gives a plausible living person's age as of "today".
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date

from .results import Citizenship, Gender

GENDER_THRESHOLD = 5000
MAX_PLAUSIBLE_AGE = 122
NOT_A_DATE = -1


@dataclass(frozen=True)
class RawFields:
    """Digit slices of a structurally valid number, before any interpretation."""
    yy: str
    mm: str
    dd: str
    sequence: str
    citizenship: str
    check_digit: str


def extract_fields(id_number: str) -> RawFields:
    return RawFields(
        yy=id_number[0:2],
        mm=id_number[2:4],
        dd=id_number[4:6],
        sequence=id_number[6:10],
        citizenship=id_number[10],
        check_digit=id_number[12],
    )


def is_real_date(year: int, month: int, day: int) -> bool:
    """Gregorian calendar check; `calendar.monthrange` handles leap years."""
    if not 1 <= month <= 12 or not 1 <= year <= 9999:
        return False
    return 1 <= day <= calendar.monthrange(year, month)[1]


def age_on(today: date, year: int, month: int, day: int) -> int:
    """
    Whole years between a birth date and `today`.

    Returns NOT_A_DATE (-1) when (year, month, day) is not a real date. A birth
    date in the future yields a negative age.
    """
    if not is_real_date(year, month, day):
        return NOT_A_DATE
    age = today.year - year
    # birthday not reached yet this year
    if (today.month, today.day) < (month, day):
        age -= 1
    return age


def resolve_birth_year(
    yy: int,
    month: int,
    day: int,
    today: date,
    max_age: int = MAX_PLAUSIBLE_AGE,
) -> int:
    """
    Pick 19yy or 20yy for a two-digit birth year.

    The 2000s candidate wins if its age on `today` falls in [0, max_age], then
    the 1900s candidate under the same test. If neither qualifies the 1900s
    candidate is returned and the caller's date check decides.
    """
    year_20xx = 2000 + yy
    year_19xx = 1900 + yy

    if 0 <= age_on(today, year_20xx, month, day) <= max_age:
        return year_20xx
    # plausible 1900s age or not, the 1900s candidate is the fallback
    return year_19xx


def classify_gender(sequence: int, threshold: int = GENDER_THRESHOLD) -> Gender:
    return Gender.MALE if sequence >= threshold else Gender.FEMALE


def classify_citizenship(flag: int) -> Citizenship:
    # Only 0 and 1 are defined; every other digit is treated as non-citizen.
    return Citizenship.CITIZEN if flag == 0 else Citizenship.PERMANENT_RESIDENT
