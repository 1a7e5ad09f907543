"""
Check digit computation for South African ID numbers.

How the check digit is built
----------------------------
The scheme uses a Luhn variant that works on two fixed groups of six digits
rather than alternating over every digit:

  1) Sum the digits at 0-based indices 0, 2, 4, 6, 8, 10.
  2) Concatenate the digits at indices 1, 3, 5, 7, 9, 11 into one integer
     and multiply it by 2.
  3) Sum the decimal digits of that product.
  4) The check digit is (10 - (total % 10)) % 10.

The steps must run in this order. Doubling the concatenated group is not the
same intermediate arithmetic as doubling each digit separately, even though the
final digit agrees with classic Luhn for this layout.

Design principles
-----------------
- **Pure functions** over ASCII digit strings; no normalization happens here.
- Callers are expected to have checked the shape (see `engine.pipeline`).
"""

from __future__ import annotations

PREFIX_LENGTH = 12
CHECK_INDEX = 12


def _digit_sum(n: int) -> int:
    """Sum the decimal digits of a non-negative integer (e.g. 23616 -> 18)."""
    return sum(ord(ch) - 48 for ch in str(n))  # '0' -> 48


def compute_check_digit(prefix: str) -> int:
    """
    Compute the expected check digit for the first 12 digits of an ID number.

    Args:
        prefix: Exactly 12 ASCII digits. A full 13-digit number is also accepted;
            only its first 12 digits are used.

    Returns:
        The check digit, 0..9.

    Raises:
        ValueError: If the input is not 12 or 13 ASCII digits.
    """
    if len(prefix) not in (PREFIX_LENGTH, CHECK_INDEX + 1) or not all("0" <= ch <= "9" for ch in prefix):
        raise ValueError("expected 12 or 13 ASCII digits")
    head = prefix[:PREFIX_LENGTH]

    # 1) odd 1-based positions
    sum_odd = sum(ord(ch) - 48 for ch in head[0::2])

    # 2) even 1-based positions, concatenated then doubled ("050000" -> 50000 -> 100000)
    even_product = int(head[1::2]) * 2

    # 3) digit sum of the product
    sum_even_digits = _digit_sum(even_product)

    # 4) fold into a single digit
    total = sum_odd + sum_even_digits
    return (10 - (total % 10)) % 10


def checksum_ok(id_number: str) -> bool:
    """
    Return True when the last digit of a 13-digit number matches the recomputed
    check digit.
    """
    if len(id_number) != CHECK_INDEX + 1 or not all("0" <= ch <= "9" for ch in id_number):
        return False
    return compute_check_digit(id_number) == ord(id_number[CHECK_INDEX]) - 48
