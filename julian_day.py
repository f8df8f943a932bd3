"""Julian day arithmetic shared by the Persian and Gregorian calendars.

Every conversion goes through a real-valued Julian Day Number (JDN).  Civil
dates are anchored at midnight, so a date's JDN always ends in ``.5``.
"""

from math import ceil, floor

GREGORIAN_EPOCH = 1721425.5
PERSIAN_EPOCH = 1948320.5

# Day counts of the nested Gregorian cycles
_DAYS_400Y = 146097
_DAYS_100Y = 36524
_DAYS_4Y = 1461
_DAYS_1Y = 365

# Days in one 2820-year Persian grand cycle
_DAYS_GRAND_CYCLE = 1029983


# --- Gregorian --------------------------------------------------------------

def is_gregorian_leap(year: int) -> bool:
    """Proleptic Gregorian leap rule."""
    return year % 4 == 0 and not (year % 100 == 0 and year % 400 != 0)


def gregorian_to_julian(year: int, month: int, day: int) -> float:
    """Return the JDN at midnight of a proleptic Gregorian date."""
    if month <= 2:
        leap_adj = 0
    elif is_gregorian_leap(year):
        leap_adj = -1
    else:
        leap_adj = -2
    y = year - 1
    return (
        (GREGORIAN_EPOCH - 1)
        + _DAYS_1Y * y
        + floor(y / 4)
        - floor(y / 100)
        + floor(y / 400)
        + floor((367 * month - 362) / 12 + leap_adj + day)
    )


def julian_to_gregorian(jd: float) -> tuple[int, int, int]:
    """Return the Gregorian (year, month, day) containing ``jd``."""
    wjd = floor(jd - 0.5) + 0.5
    depoch = wjd - GREGORIAN_EPOCH

    quadricent = floor(depoch / _DAYS_400Y)
    dqc = depoch % _DAYS_400Y
    cent = floor(dqc / _DAYS_100Y)
    dcent = dqc % _DAYS_100Y
    quad = floor(dcent / _DAYS_4Y)
    dquad = dcent % _DAYS_4Y
    yindex = floor(dquad / _DAYS_1Y)

    year = quadricent * 400 + cent * 100 + quad * 4 + yindex
    # The last day of a leap cycle belongs to the year already counted
    if not (cent == 4 or yindex == 4):
        year += 1

    yearday = wjd - gregorian_to_julian(year, 1, 1)
    if wjd < gregorian_to_julian(year, 3, 1):
        leap_adj = 0
    elif is_gregorian_leap(year):
        leap_adj = 1
    else:
        leap_adj = 2
    month = floor(((yearday + leap_adj) * 12 + 373) / 367)
    day = wjd - gregorian_to_julian(year, month, 1) + 1
    return int(year), int(month), int(day)


def days_between(
    start: tuple[int, int, int], end: tuple[int, int, int],
) -> int:
    """Return the number of days from Gregorian ``start`` to ``end``."""
    return int(gregorian_to_julian(*end) - gregorian_to_julian(*start))


# --- Persian ----------------------------------------------------------------

def _epoch_base(year: int) -> int:
    return year - (474 if year >= 0 else 473)


def is_persian_leap(year: int) -> bool:
    """Closed-form leap test of the 2820-year intercalation cycle."""
    epbase = year - (474 if year > 0 else 473)
    return ((epbase % 2820 + 474 + 38) * 682) % 2816 < 682


def persian_to_julian(year: int, month: int, day: int) -> float:
    """Return the JDN at midnight of a Persian date."""
    epbase = _epoch_base(year)
    epyear = 474 + epbase % 2820

    if month <= 7:
        month_days = (month - 1) * 31
    else:
        month_days = (month - 1) * 30 + 6

    return (
        day
        + month_days
        + floor((epyear * 682 - 110) / 2816)
        + (epyear - 1) * 365
        + floor(epbase / 2820) * _DAYS_GRAND_CYCLE
        + (PERSIAN_EPOCH - 1)
    )


def julian_to_persian(jd: float) -> tuple[int, int, int]:
    """Return the Persian (year, month, day) containing ``jd``."""
    jd = floor(jd) + 0.5
    depoch = jd - persian_to_julian(475, 1, 1)
    cycle = floor(depoch / _DAYS_GRAND_CYCLE)
    cyear = depoch % _DAYS_GRAND_CYCLE

    if cyear == _DAYS_GRAND_CYCLE - 1:
        ycycle = 2820
    else:
        aux1 = floor(cyear / 366)
        aux2 = cyear % 366
        ycycle = floor((2134 * aux1 + 2816 * aux2 + 2815) / 1028522) + aux1 + 1

    year = ycycle + 2820 * cycle + 474
    if year <= 0:
        year -= 1

    yday = jd - persian_to_julian(year, 1, 1) + 1
    if yday <= 186:
        month = ceil(yday / 31)
    else:
        month = ceil((yday - 6) / 30)
    day = jd - persian_to_julian(year, month, 1) + 1
    return int(year), int(month), int(day)


def julian_day_of_week(jd: float) -> int:
    """Weekday of ``jd``, 0 = Sunday."""
    return floor(jd + 1.5) % 7
