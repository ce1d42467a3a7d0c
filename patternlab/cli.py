import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from patternlab.config import get_settings
from patternlab.core.formatting import format_fixed
from patternlab.core.logging import create_logger, ring_buffer
from patternlab.simuduck import FLY_BEHAVIOURS, UnknownDuckError, available_ducks, create_duck
from patternlab.starbuzz import MenuError, MenuItemNotFoundError, load_menu, make_beverage
from patternlab.weather import pull, push

WEATHER_VARIANTS = {"push": push, "pull": pull}


def _reading(value: str) -> tuple[float, float, float]:
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected TEMPERATURE,HUMIDITY,PRESSURE, got '{value}'")
    try:
        temperature, humidity, pressure = (float(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"readings must be numbers, got '{value}'")
    return temperature, humidity, pressure


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="patternlab", description="Run the design-pattern demos.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log demo internals to stderr.")
    sub = parser.add_subparsers(dest="command", required=True)

    starbuzz = sub.add_parser("starbuzz", help="Order a decorated coffee.")
    starbuzz.add_argument("beverage", nargs="?", help="Base beverage, e.g. dark_roast.")
    starbuzz.add_argument(
        "--with", dest="condiments", action="append", default=[], metavar="CONDIMENT",
        help="Condiment to add; repeat to stack them.",
    )
    starbuzz.add_argument("--menu", dest="menu_path", default=None, help="Alternative menu JSON file.")
    starbuzz.add_argument("--list", action="store_true", help="Print the menu and exit.")

    weather = sub.add_parser("weather", help="Feed readings to a weather station.")
    weather.add_argument("--variant", choices=sorted(WEATHER_VARIANTS), default="push")
    weather.add_argument(
        "--reading", dest="readings", action="append", type=_reading, required=True, metavar="T,H,P",
        help="One set of measurements; repeat for several.",
    )
    weather.add_argument("--show-events", action="store_true", help="Print the station event log.")

    ducks = sub.add_parser("ducks", help="Show how each duck flies.")
    ducks.add_argument("--kind", dest="kinds", action="append", choices=available_ducks(), default=[])
    ducks.add_argument("--fly-with", choices=sorted(FLY_BEHAVIOURS), default=None, help="Swap every duck's fly behaviour.")
    return parser


def _run_starbuzz(args: argparse.Namespace) -> list[str]:
    menu = load_menu(args.menu_path)
    if args.list or not args.beverage:
        lines = [f"{item.name}: {item.display_name} ${format_fixed(item.price, 2)}" for item in menu.beverages()]
        lines += [f"+ {item.name}: {item.display_name} ${format_fixed(item.price, 2)}" for item in menu.condiments()]
        return lines
    beverage = make_beverage(args.beverage, args.condiments, menu=menu)
    return [f"{beverage.description()} ${format_fixed(beverage.cost(), 2)}"]


def _run_weather(args: argparse.Namespace) -> list[str]:
    variant = WEATHER_VARIANTS[args.variant]
    station = variant.WeatherStation()
    displays = [
        variant.CurrentConditionsDisplay(station),
        variant.StatisticsDisplay(station),
        variant.ForecastDisplay(station),
    ]
    lines: list[str] = []
    for temperature, humidity, pressure in args.readings:
        station.set_measurements(temperature, humidity, pressure)
        lines.extend(d.display() for d in displays)
    if args.show_events:
        lines.extend(f"[{e['level']}] {e['event']} {e['details']}" for e in station.get_events())
    return lines


def _run_ducks(args: argparse.Namespace) -> list[str]:
    lines = []
    for kind in args.kinds or available_ducks():
        duck = create_duck(kind)
        if args.fly_with:
            duck.fly_behaviour = FLY_BEHAVIOURS[args.fly_with]()
        lines.append(f"{duck.display()}: {duck.perform_fly()}")
    return lines


COMMANDS = {"starbuzz": _run_starbuzz, "weather": _run_weather, "ducks": _run_ducks}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"patternlab: invalid settings: {exc}", file=sys.stderr)
        return 2
    logger = create_logger("patternlab.cli", settings.log_ring_size, settings.log_level)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    try:
        lines = COMMANDS[args.command](args)
    except (MenuError, MenuItemNotFoundError, UnknownDuckError) as exc:
        logger.error("command_failed", extra={"details": {"command": args.command, "error": str(exc)}})
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else str(exc)
        print(f"patternlab {args.command}: {message}", file=sys.stderr)
        return 2
    logger.info("command_finished", extra={"details": {"command": args.command, "lines": len(lines)}})
    for line in lines:
        print(line)
    return 0


def recent_events() -> list[dict]:
    handler = ring_buffer(logging.getLogger("patternlab.cli"))
    return handler.get_events() if handler else []


if __name__ == "__main__":
    sys.exit(main())
