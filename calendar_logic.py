"""Pure Persian calendar calculations, no I/O beyond debug logging."""

import logging

from julian_day import (
    days_between,
    gregorian_to_julian,
    is_persian_leap,
    julian_day_of_week,
    julian_to_gregorian,
    julian_to_persian,
    persian_to_julian,
)

logger = logging.getLogger(__name__)

DAY_ABBR = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

MONTHS = [
    "",
    "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
    "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
]

_CELL = "{:3d}  "
_BLANK = " " * 5


class CalendarError(ValueError):
    """Base class for calendar errors."""


class InvalidDate(CalendarError):
    """A year, month or day failed the range check."""

    def __init__(self, field: str, value) -> None:
        super().__init__(f"Invalid {field} [{value}].")
        self.field = field
        self.value = value


class InvalidArgument(CalendarError):
    """An option or argument other than a date is out of range."""


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_date(year, month, day) -> None:
    """Coarse range check of a date triple.

    Days are only checked against 1–31, never against the month's real
    length; an out-of-range day rolls over into the following month.
    """
    if not (_is_int(year) and 1 <= year <= 9999):
        raise InvalidDate("year", year)
    if not (_is_int(month) and 1 <= month <= 12):
        raise InvalidDate("month", month)
    if not (_is_int(day) and 1 <= day <= 31):
        raise InvalidDate("day", day)


# --- conversions ------------------------------------------------------------

def to_gregorian(year: int, month: int, day: int, *,
                 debug: bool = False) -> tuple[int, int, int]:
    """Convert a Persian date to Gregorian (year, month, day)."""
    validate_date(year, month, day)
    if debug:
        logger.debug("Persian: YYYY [%s] MM [%s] DD [%s]", year, month, day)

    result = julian_to_gregorian(persian_to_julian(year, month, day))

    if debug:
        logger.debug("Gregorian: YYYY [%s] MM [%s] DD [%s]", *result)
    return result


def from_gregorian(year: int, month: int, day: int, *,
                   debug: bool = False) -> tuple[int, int, int]:
    """Convert a Gregorian date to Persian (year, month, day)."""
    validate_date(year, month, day)
    if debug:
        logger.debug("Gregorian: YYYY [%s] MM [%s] DD [%s]", year, month, day)

    # Midnight: zero seconds into the day
    jd = gregorian_to_julian(year, month, day) + 0 / 86400.0
    result = julian_to_persian(jd)

    if debug:
        logger.debug("Persian: YYYY [%s] MM [%s] DD [%s]", *result)
    return result


def is_leap(year: int) -> bool:
    """Return True if the Persian ``year`` has 366 days."""
    return is_persian_leap(year)


def day_of_week(year: int, month: int, day: int) -> int:
    """Weekday of a Persian date, 0 = Sunday … 6 = Saturday."""
    validate_date(year, month, day)
    return julian_day_of_week(persian_to_julian(year, month, day))


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day-of-year of a Persian date."""
    validate_date(year, month, day)
    return int(persian_to_julian(year, month, day)
               - persian_to_julian(year, 1, 1)) + 1


def days_in_month(year: int, month: int) -> int:
    """Number of days in a Persian month, Esfand included."""
    validate_date(year, month, 1)
    start = julian_to_gregorian(persian_to_julian(year, month, 1))
    next_year, next_mon = next_month(year, month)
    end = julian_to_gregorian(persian_to_julian(next_year, next_mon, 1))
    return days_between(start, end)


def format_date(year: int, month: int, day: int) -> str:
    """Return ``"DD, MonthName YYYY"``."""
    validate_date(year, month, day)
    return f"{day:02d}, {MONTHS[month]} {year:04d}"


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


# --- month grid -------------------------------------------------------------

def month_grid(year: int, month: int) -> list[list[int | None]]:
    """Return the week rows of a Persian month.

    Each cell is a day number or None for the blanks before day 1.
    Weeks start on Sunday.  Rows wrap every 7 cells counted from the first
    cell of the grid, and the last row is not padded.
    """
    start = day_of_week(year, month, 1)
    cells: list[int | None] = [None] * start
    cells.extend(range(1, days_in_month(year, month) + 1))
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def render_month(year: int, month: int) -> str:
    """Render a Persian month as a fixed-width text calendar.

    Rows are right-stripped and a full last row gets no extra blank line, so
    the text is not byte for byte the classic C-style layout.
    """
    grid = month_grid(year, month)
    lines = [
        "",
        f"\t{MONTHS[month]} [{year:04d}]",
        "",
        "  ".join(DAY_ABBR),
    ]
    for row in grid:
        text = "".join(_BLANK if d is None else _CELL.format(d) for d in row)
        lines.append(text.rstrip())
    return "\n".join(lines) + "\n\n"
