"""Command line front end.

Usage:
    measurements units distance
    measurements convert '1,234.23"' cm --dimension distance
    measurements convert "1 234,23\"" m --dimension distance --culture ru
    measurements convert 50°F °C --dimension temperature --decimal

Errors (unknown units, malformed measurements, unknown cultures) are printed
on stderr and the process exits with status 1.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .culture import get_culture
from .exceptions import MeasurementError
from .logger import logger
from .measurement import DecimalMeasurement, Measurement
from .unit import UNIT_TYPES, UnitEnum, unit_table

CONSOLE = Console()
ERR_CONSOLE = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="measurements", description="Typed unit conversion")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    units = commands.add_parser("units", help="list the units of a dimension")
    units.add_argument("dimension", choices=sorted(UNIT_TYPES))

    convert = commands.add_parser("convert", help="convert a measurement to another unit")
    convert.add_argument("text", help='measurement text, e.g. 1.5cm or 10\'')
    convert.add_argument("target", help="name of the target unit")
    convert.add_argument("-d", "--dimension", choices=sorted(UNIT_TYPES), required=True)
    convert.add_argument("-c", "--culture", default=None, help="culture of the number, e.g. ru or de-DE")
    convert.add_argument("--decimal", action="store_true", help="convert with decimal arithmetic")
    return parser


def units_table(unit_type: type[UnitEnum]) -> Table:
    """Rich table describing every unit of ``unit_type``."""
    table = unit_table(unit_type)
    t = Table(title=unit_type.__name__)
    t.add_column("Unit")
    t.add_column("Name")
    t.add_column("Alternative")
    t.add_column("Precision", justify="right")
    t.add_column("Base", justify="center")
    for unit, descriptor, _ in unit_type.metadata():
        t.add_row(
            unit.name,
            Text(descriptor.name),
            Text(descriptor.alternative_name or ""),
            str(descriptor.precision),
            "✓" if unit is table.base_unit else "",
        )
    return t


def run_convert(args: argparse.Namespace, console: Console) -> None:
    unit_type = UNIT_TYPES[args.dimension]
    culture = get_culture(args.culture)
    variant = DecimalMeasurement if args.decimal else Measurement

    source = variant.parse(args.text, unit_type, culture)
    target = unit_type.parse(args.target)
    result = source.to(target)
    logger.debug("Converted %r to %r", source, result)

    t = Table.grid(padding=(0, 2))
    t.add_row("[b]Input[/b]: ", Text(source.to_string("NF", culture)))
    t.add_row("[b]Result[/b]: ", Text(result.to_string("NF", culture)))
    t.add_row("[b]Rounded[/b]: ", Text(result.to_string("ND", culture)))
    console.print(Panel(t, title=unit_type.__name__, padding=(1, 2)))


def main(argv: Sequence[str] | None = None, console: Console | None = None, err_console: Console | None = None) -> int:
    """Run the command line front end.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        console: Console for regular output.
        err_console: Console for errors and log records.

    Returns:
        int: Process exit status.
    """
    console = console or CONSOLE
    err_console = err_console or ERR_CONSOLE
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )

    try:
        if args.command == "units":
            console.print(units_table(UNIT_TYPES[args.dimension]))
        else:
            run_convert(args, console)
    except MeasurementError as err:
        err_console.print(Text(f"error: {err}", style="bold red"))
        return 1
    return 0
