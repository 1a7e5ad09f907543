from datetime import date

import pytest

from rsaid.engine.pipeline import IdValidator

# Reference date for every test that depends on "today".
TODAY = date(2026, 10, 18)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def validator():
    return IdValidator(clock=lambda: TODAY)
