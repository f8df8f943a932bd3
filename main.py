"""Entry point: prints Persian calendars and converts dates."""

import argparse
import logging
import sys

from calendar_logic import CalendarError, next_month, prev_month
from logging_setup import setup_logging
from persian_calendar import PersianCalendar
from settings import load_settings, save_settings

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="persian-cal",
        description="Persian (Solar Hijri) calendar and date conversion.",
    )
    parser.add_argument("--debug", action="store_true",
                        help="trace intermediate dates during conversion")
    sub = parser.add_subparsers(dest="command", required=True)

    cal = sub.add_parser("cal", help="print a Persian month")
    cal.add_argument("year", type=int, nargs="?")
    cal.add_argument("month", type=int, nargs="?")
    cal.add_argument("-B", "--months-before", type=int, default=None)
    cal.add_argument("-A", "--months-after", type=int, default=None)

    for name, help_text in (("to-gregorian", "Persian date to Gregorian"),
                            ("from-gregorian", "Gregorian date to Persian")):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("year", type=int)
        p.add_argument("month", type=int)
        p.add_argument("day", type=int)

    sub.add_parser("today", help="print today's Persian date")

    leap = sub.add_parser("leap", help="check a Persian leap year")
    leap.add_argument("year", type=int)

    config = sub.add_parser("config", help="show or change saved settings")
    config.add_argument("--debug", dest="set_debug", choices=("on", "off"))
    config.add_argument("--months-before", type=int, default=None)
    config.add_argument("--months-after", type=int, default=None)
    return parser


def _cmd_cal(args, settings: dict, debug: bool) -> None:
    cal = PersianCalendar(debug=debug)
    year = args.year if args.year is not None else cal.year
    month = args.month if args.month is not None else cal.month
    before = args.months_before
    after = args.months_after
    if before is None:
        before = settings["months_before"]
    if after is None:
        after = settings["months_after"]

    y, m = year, month
    for _ in range(max(0, before)):
        y, m = prev_month(y, m)
    for _ in range(max(0, before) + 1 + max(0, after)):
        print(cal.get_calendar(y, m), end="")
        y, m = next_month(y, m)


def _cmd_config(args, settings: dict) -> None:
    changed = False
    if args.set_debug is not None:
        settings["debug"] = args.set_debug == "on"
        changed = True
    for key in ("months_before", "months_after"):
        value = getattr(args, key)
        if value is not None:
            settings[key] = max(0, value)
            changed = True
    if changed:
        save_settings(settings)
    for key, value in settings.items():
        print(f"{key}: {value}")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = load_settings()
    debug = args.debug or settings["debug"]
    try:
        setup_logging(level=logging.DEBUG if debug else logging.WARNING,
                      log_file=settings["log_file"])
    except OSError as exc:
        print(f"error: cannot open log file: {exc}", file=sys.stderr)
        return 2

    try:
        if args.command == "cal":
            _cmd_cal(args, settings, debug)
        elif args.command == "to-gregorian":
            cal = PersianCalendar(args.year, args.month, args.day, debug=debug)
            print("{:04d}-{:02d}-{:02d}".format(*cal.to_gregorian()))
        elif args.command == "from-gregorian":
            cal = PersianCalendar(debug=debug)
            print("{:04d}-{:02d}-{:02d}".format(
                *cal.from_gregorian(args.year, args.month, args.day)))
        elif args.command == "today":
            print(PersianCalendar(debug=debug).as_string())
        elif args.command == "leap":
            print("leap" if PersianCalendar(debug=debug).is_leap(args.year) else "common")
        elif args.command == "config":
            _cmd_config(args, settings)
    except CalendarError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
