import logging
from datetime import date

import pytest

import persian_calendar


class FixedDate(date):
    """Stands in for ``datetime.date`` with today pinned to Nowruz 1390."""

    @classmethod
    def today(cls):
        return cls(2011, 3, 21)


@pytest.fixture
def fixed_today(monkeypatch):
    monkeypatch.setattr(persian_calendar, "date", FixedDate)


@pytest.fixture(autouse=True)
def restore_trace_level():
    # turning the trace on opens up the calendar_logic logger
    logger = logging.getLogger("calendar_logic")
    level = logger.level
    yield
    logger.setLevel(level)
