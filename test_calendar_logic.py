import logging
from datetime import date

import pytest

import calendar_logic
from calendar_logic import (
    DAY_ABBR,
    MONTHS,
    InvalidDate,
    day_of_week,
    day_of_year,
    days_in_month,
    format_date,
    from_gregorian,
    is_leap,
    month_grid,
    next_month,
    prev_month,
    render_month,
    to_gregorian,
    validate_date,
)


# --- validation --------------------------------------------------------------

@pytest.mark.parametrize("args,field,value", [
    ((-1390, 1, 1), "year", -1390),
    ((0, 1, 1), "year", 0),
    ((10000, 1, 1), "year", 10000),
    (("1390", 1, 1), "year", "1390"),
    ((True, 1, 1), "year", True),
    ((1390, 13, 1), "month", 13),
    ((1390, 0, 1), "month", 0),
    ((1390, 1.0, 1), "month", 1.0),
    ((1390, 12, 32), "day", 32),
    ((1390, 12, 0), "day", 0),
    ((1390, 12, None), "day", None),
])
def test_validate_date_reports_field(args, field, value):
    with pytest.raises(InvalidDate) as exc_info:
        validate_date(*args)
    assert exc_info.value.field == field
    assert exc_info.value.value == value
    assert f"Invalid {field}" in str(exc_info.value)


def test_validate_date_checks_year_first():
    with pytest.raises(InvalidDate) as exc_info:
        validate_date(0, 13, 32)
    assert exc_info.value.field == "year"


def test_invalid_date_is_a_value_error():
    with pytest.raises(ValueError):
        validate_date(1390, 13, 1)


def test_validate_date_accepts_day_31_in_any_month():
    validate_date(1390, 12, 31)
    validate_date(2011, 2, 31)


@pytest.mark.parametrize("fn", [to_gregorian, from_gregorian, day_of_week, day_of_year, format_date])
def test_operations_validate_before_converting(fn):
    with pytest.raises(InvalidDate) as exc_info:
        fn(1390, 13, 1)
    assert exc_info.value.field == "month"


def test_days_in_month_validates_month():
    with pytest.raises(InvalidDate) as exc_info:
        days_in_month(1390, 13)
    assert exc_info.value.field == "month"


# --- conversions -------------------------------------------------------------

def test_to_gregorian_nowruz_1390():
    assert to_gregorian(1390, 1, 1) == (2011, 3, 21)


def test_from_gregorian_nowruz_1390():
    assert from_gregorian(2011, 3, 21) == (1390, 1, 1)


@pytest.mark.parametrize("persian,gregorian", [
    ((1389, 9, 16), (2010, 12, 7)),
    ((1392, 2, 15), (2013, 5, 5)),
    ((1401, 8, 1), (2022, 10, 23)),
])
def test_known_conversions(persian, gregorian):
    assert to_gregorian(*persian) == gregorian
    assert from_gregorian(*gregorian) == persian


def test_out_of_range_day_rolls_over():
    # Mehr has 30 days, February 2011 has 28
    assert to_gregorian(1390, 7, 31) == to_gregorian(1390, 8, 1)
    assert from_gregorian(2011, 2, 31) == from_gregorian(2011, 3, 3)


@pytest.mark.parametrize("year", [1, 474, 475, 1000, 1389, 1390, 1391, 1392, 2000, 3294, 3295, 9000])
def test_persian_round_trip(year):
    for month in range(1, 13):
        for day in range(1, days_in_month(year, month) + 1):
            assert from_gregorian(*to_gregorian(year, month, day)) == (year, month, day)


@pytest.mark.parametrize("year", [623, 1582, 1900, 2000, 2024, 2100, 9999])
def test_gregorian_round_trip(year):
    # 9999-12-31 is the last date datetime can hold, so walk ordinals
    for n in range(date(year, 1, 1).toordinal(), date(year, 12, 31).toordinal() + 1):
        d = date.fromordinal(n)
        g = (d.year, d.month, d.day)
        assert to_gregorian(*from_gregorian(*g)) == g


def test_debug_traces_conversion(caplog):
    with caplog.at_level(logging.DEBUG, logger="calendar_logic"):
        to_gregorian(1390, 1, 1, debug=True)
    messages = [r.getMessage() for r in caplog.records if r.name == "calendar_logic"]
    assert messages == [
        "Persian: YYYY [1390] MM [1] DD [1]",
        "Gregorian: YYYY [2011] MM [3] DD [21]",
    ]


def test_no_trace_without_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="calendar_logic"):
        assert from_gregorian(2011, 3, 21) == from_gregorian(2011, 3, 21, debug=True)
        caplog.clear()
        from_gregorian(2011, 3, 21)
    assert not [r for r in caplog.records if r.name == "calendar_logic"]


# --- derived values ----------------------------------------------------------

@pytest.mark.parametrize("year", [1375, 1379, 1383, 1387, 1391])
def test_is_leap(year):
    assert is_leap(year)
    assert not is_leap(year + 1)


def test_day_of_week_nowruz_1390_is_monday():
    assert day_of_week(1390, 1, 1) == 1


def test_day_of_week_matches_gregorian_weekday():
    for month in range(1, 13):
        for day in range(1, days_in_month(1390, month) + 1):
            g = date(*to_gregorian(1390, month, day))
            assert day_of_week(1390, month, day) == g.isoweekday() % 7


def test_days_in_month_1390():
    assert days_in_month(1390, 1) == 31
    assert days_in_month(1390, 6) == 31
    assert days_in_month(1390, 7) == 30
    assert days_in_month(1390, 12) == 29


def test_days_in_esfand_of_leap_year():
    assert days_in_month(1391, 12) == 30


def test_days_in_month_sum_to_year_length():
    for year in range(1370, 1411):
        total = sum(days_in_month(year, m) for m in range(1, 13))
        assert total == (366 if is_leap(year) else 365)


def test_day_of_year():
    assert day_of_year(1390, 1, 1) == 1
    assert day_of_year(1390, 7, 1) == 187
    assert day_of_year(1390, 12, 29) == 365
    assert day_of_year(1391, 12, 30) == 366


def test_format_date():
    assert format_date(1389, 9, 16) == "16, Azar 1389"
    assert format_date(5, 1, 3) == "03, Farvardin 0005"


def test_month_table():
    assert len(MONTHS) == 13
    assert MONTHS[0] == ""
    assert MONTHS[1] == "Farvardin"
    assert MONTHS[12] == "Esfand"


def test_prev_next_month_wrap():
    assert prev_month(1390, 1) == (1389, 12)
    assert prev_month(1390, 5) == (1390, 4)
    assert next_month(1390, 12) == (1391, 1)
    assert next_month(1390, 5) == (1390, 6)


# --- grid --------------------------------------------------------------------

def test_month_grid_farvardin_1390():
    grid = month_grid(1390, 1)
    assert grid[0] == [None, 1, 2, 3, 4, 5, 6]
    assert grid[1] == list(range(7, 14))
    assert grid[-1] == [28, 29, 30, 31]
    assert len(grid) == 5


def test_month_grid_layout_follows_weekday():
    for year, month in [(1390, 1), (1390, 12), (1391, 12), (1400, 7)]:
        grid = month_grid(year, month)
        cells = [c for row in grid for c in row]
        start = day_of_week(year, month, 1)
        assert cells[:start] == [None] * start
        assert cells[start:] == list(range(1, days_in_month(year, month) + 1))
        assert all(len(row) == 7 for row in grid[:-1])
        assert 1 <= len(grid[-1]) <= 7


def test_render_month_farvardin_1390():
    expected = (
        "\n"
        "\tFarvardin [1390]\n"
        "\n"
        "Sun  Mon  Tue  Wed  Thu  Fri  Sat\n"
        "       1    2    3    4    5    6\n"
        "  7    8    9   10   11   12   13\n"
        " 14   15   16   17   18   19   20\n"
        " 21   22   23   24   25   26   27\n"
        " 28   29   30   31\n"
        "\n"
    )
    assert render_month(1390, 1) == expected


def test_render_month_header_uses_day_abbreviations():
    lines = render_month(1390, 12).split("\n")
    assert lines[1] == "\tEsfand [1390]"
    assert lines[3].split() == DAY_ABBR


def test_render_month_rejects_bad_month():
    with pytest.raises(calendar_logic.InvalidDate):
        render_month(1390, 13)


def test_render_month_full_last_row_has_single_trailing_blank_line():
    # Ordibehesht 1390 starts on Thursday and fills its fifth row exactly
    text = render_month(1390, 2)
    lines = text.split("\n")
    assert lines[-3] == " 25   26   27   28   29   30   31"
    assert text.endswith("31\n\n")
    assert not text.endswith("\n\n\n")
    assert all(line == line.rstrip() for line in lines)
