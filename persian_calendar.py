"""Persian (Solar Hijri) date holder built on the pure calendar functions."""

import logging
from datetime import date

import calendar_logic
from calendar_logic import MONTHS, InvalidArgument, validate_date

DAYS = [
    "Yekshanbeh", "Doshanbeh", "Seshhanbeh", "Chaharshanbeh",
    "Panjshanbeh", "Jomeh", "Shanbeh",
]

__all__ = ["DAYS", "MONTHS", "PersianCalendar"]


class PersianCalendar:
    """One Persian date plus its conversion options.

    With no arguments the date is today's, converted from the system clock.
    Accessors that take explicit arguments work on those instead of the
    stored date and never change it.
    """

    __slots__ = ("_year", "_month", "_day", "_debug")

    def __init__(self, year: int | None = None, month: int | None = None,
                 day: int | None = None, *, debug: bool = False) -> None:
        self._debug = False
        self.debug(debug)

        given = [v is not None for v in (year, month, day)]
        if all(given):
            validate_date(year, month, day)
        elif any(given):
            raise InvalidArgument("year, month and day must be given together")
        else:
            year, month, day = self.today()

        self._year = year
        self._month = month
        self._day = day

    # ------------------------------------------------------------------
    # Stored date
    # ------------------------------------------------------------------
    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def _resolve(self, year, month, day) -> tuple[int, int, int]:
        return (
            self._year if year is None else year,
            self._month if month is None else month,
            self._day if day is None else day,
        )

    # ------------------------------------------------------------------
    # Debug option
    # ------------------------------------------------------------------
    def debug(self, flag) -> None:
        """Turn the conversion trace on (1) or off (0).

        The trace is logged at DEBUG on the ``calendar_logic`` logger, which
        is opened up to DEBUG when the trace is turned on.  Output still needs
        a handler, e.g. ``logging.basicConfig()``.
        """
        if isinstance(flag, int) and flag in (0, 1):
            self._debug = bool(flag)
            if self._debug and not calendar_logic.logger.isEnabledFor(logging.DEBUG):
                calendar_logic.logger.setLevel(logging.DEBUG)
        else:
            raise InvalidArgument(f"Invalid value for debug [{flag!r}].")

    @property
    def debug_enabled(self) -> bool:
        return self._debug

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------
    def to_gregorian(self, year: int | None = None, month: int | None = None,
                     day: int | None = None) -> tuple[int, int, int]:
        """Gregorian equivalent of the stored (or given) Persian date."""
        return calendar_logic.to_gregorian(
            *self._resolve(year, month, day), debug=self._debug)

    def from_gregorian(self, year: int, month: int,
                       day: int) -> tuple[int, int, int]:
        """Persian equivalent of a Gregorian date."""
        return calendar_logic.from_gregorian(year, month, day, debug=self._debug)

    def today(self) -> tuple[int, int, int]:
        """Today's date in the Persian calendar."""
        today = date.today()
        return self.from_gregorian(today.year, today.month, today.day)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    def is_leap(self, year: int | None = None) -> bool:
        return calendar_logic.is_leap(self._year if year is None else year)

    def dow(self, year: int | None = None, month: int | None = None,
            day: int | None = None) -> int:
        """Day of the week, starting with Sunday (0)."""
        return calendar_logic.day_of_week(*self._resolve(year, month, day))

    def day_name(self, year: int | None = None, month: int | None = None,
                 day: int | None = None) -> str:
        return DAYS[self.dow(year, month, day)]

    def month_name(self, month: int | None = None) -> str:
        month = self._month if month is None else month
        validate_date(self._year, month, 1)
        return MONTHS[month]

    def day_of_year(self, year: int | None = None, month: int | None = None,
                    day: int | None = None) -> int:
        return calendar_logic.day_of_year(*self._resolve(year, month, day))

    def days_in_month(self, year: int | None = None,
                      month: int | None = None) -> int:
        year, month, _ = self._resolve(year, month, 1)
        return calendar_logic.days_in_month(year, month)

    def get_calendar(self, year: int | None = None,
                     month: int | None = None) -> str:
        """Text calendar of the stored (or given) month."""
        year, month, _ = self._resolve(year, month, 1)
        return calendar_logic.render_month(year, month)

    def as_string(self) -> str:
        return calendar_logic.format_date(self._year, self._month, self._day)

    # ------------------------------------------------------------------
    # Value behaviour
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"PersianCalendar({self._year}, {self._month}, {self._day})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, PersianCalendar):
            return NotImplemented
        return (self._year, self._month, self._day) == (
            other._year, other._month, other._day)

    def __hash__(self) -> int:
        return hash((self._year, self._month, self._day))
