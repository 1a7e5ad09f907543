import pytest

from rsaid.engine.checksum import checksum_ok, compute_check_digit


def _classic_luhn_digit(prefix: str) -> int:
    # Right-to-left alternating doubling, used here only as a cross-check.
    total = 0
    for i, ch in enumerate(reversed(prefix)):
        d = int(ch)
        if i % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return (10 - total % 10) % 10


@pytest.mark.parametrize(
    "prefix,expected",
    [
        ("800101500908", 7),
        ("900101480008", 9),
        ("850101499918", 8),
        ("000229500008", 3),
        # even-position digits 0,5,0,0,0,0 -> 50000 * 2 = 100000 -> digit sum 1
        ("000500000000", 9),
    ],
)
def test_compute_check_digit(prefix, expected):
    assert compute_check_digit(prefix) == expected


def test_full_number_uses_first_twelve_digits():
    assert compute_check_digit("8001015009087") == 7


def test_documented_vector_does_not_match_digit_5():
    # 9001014800085: recomputed digit is 9, so the trailing 5 is wrong
    assert compute_check_digit("900101480008") == 9
    assert not checksum_ok("9001014800085")
    assert checksum_ok("9001014800089")


@pytest.mark.parametrize("prefix", ["800101500908", "261019500008", "999999999999", "000000000000"])
def test_exactly_one_check_digit_passes(prefix):
    passing = [d for d in "0123456789" if checksum_ok(prefix + d)]
    assert passing == [str(compute_check_digit(prefix))]


def test_agrees_with_classic_luhn_for_this_layout():
    prefixes = ["%012d" % (n * 7919 % 10**12) for n in range(1, 400)]
    prefixes += ["555555555555", "909090909090", "059999000000"]
    for p in prefixes:
        assert compute_check_digit(p) == _classic_luhn_digit(p), p


@pytest.mark.parametrize("bad", ["", "12345678901", "800101500908XYZ", "80010150090877", "80010150090A", "８００１０１５００９０８"])
def test_rejects_malformed_prefix(bad):
    with pytest.raises(ValueError):
        compute_check_digit(bad)


def test_checksum_ok_wrong_length():
    assert not checksum_ok("800101500908")
    assert not checksum_ok("80010150090877")


def test_checksum_ok_non_digit_is_false():
    assert not checksum_ok("80010150090X7")
    assert not checksum_ok("800101500908X")
