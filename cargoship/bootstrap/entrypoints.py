"""
bootstrap/entrypoints.py - Command line entry point

Runs the reference voyage: three containers loaded onto one ship, a report,
one container taken off, and a second report.
"""

from __future__ import annotations
from typing import List, Optional, TextIO
import argparse
import json
import logging
import sys

from .config import CargoShipConfig, DEFAULT_LOG_FORMAT
from ..containers import ContainerFactory
from ..errors import CargoShipError
from ..ship import ContainerShip, format_ship_report

logger = logging.getLogger(__name__)

_HANDLER_NAME = "cargoship.console"


class JSONFormatter(logging.Formatter):
    def format(self, record):
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(level: str = "INFO", json_format: bool = False, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Use JSON format for logs
        fmt: Format string for plain-text logs
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = JSONFormatter() if json_format else logging.Formatter(fmt)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Replace our own handler on repeated calls
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)


def _emit_report(ship: ContainerShip, out: TextIO, as_json: bool) -> None:
    report = ship.report()
    if as_json:
        print(report.model_dump_json(indent=2), file=out)
    else:
        print(format_ship_report(report), file=out)


def run_demo(
    factory: Optional[ContainerFactory] = None,
    out: Optional[TextIO] = None,
    as_json: bool = False,
) -> ContainerShip:
    """
    Run the reference voyage and return the ship.

    Raises the first CargoShipError any step reports.
    """
    factory = factory or ContainerFactory()
    out = out or sys.stdout

    ship = ContainerShip("Ocean Carrier", max_speed=20, max_containers=5, max_weight=50000)

    liquid = factory.create_liquid(max_capacity=100, empty_weight=10, is_dangerous=True)
    ship.add_container(liquid).raise_for_error()
    liquid.load(40).raise_for_error()
    print(f"Loaded {liquid.kind.label} container {liquid.container_id}", file=out)

    gas = factory.create_gas(max_capacity=50, empty_weight=5, pressure=10)
    ship.add_container(gas).raise_for_error()
    gas.load(30).raise_for_error()
    print(f"Loaded {gas.kind.label} container {gas.container_id}", file=out)

    cooled = factory.create_cooled(max_capacity=80, empty_weight=15, temperature=-5)
    ship.add_container(cooled).raise_for_error()
    cooled.load(60).raise_for_error()
    print(f"Loaded {cooled.kind.label} container {cooled.container_id}", file=out)

    _emit_report(ship, out, as_json)

    ship.remove_container(liquid.container_id).raise_for_error()
    print(f"Removed {liquid.kind.label} container {liquid.container_id}", file=out)
    _emit_report(ship, out, as_json)

    return ship


def cli_main(args: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        description="Container ship loading",
        prog="cargoship",
    )
    parser.add_argument(
        "command",
        choices=["demo"],
        help="Command to run",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (overrides CARGOSHIP_LOG_LEVEL)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print ship reports as JSON",
    )

    parsed = parser.parse_args(args)

    try:
        config = CargoShipConfig.from_env()
    except CargoShipError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    log_level = "DEBUG" if parsed.verbose else (parsed.log_level or config.logging.level)
    setup_logging(level=log_level, json_format=config.logging.json_logs, fmt=config.logging.format)

    factory = ContainerFactory(policy=config.policy)
    try:
        run_demo(factory=factory, as_json=parsed.json)
    except CargoShipError as e:
        logger.error(f"Demo aborted: {e.code}")
        print(f"Error: {e.message}")
        return 1

    return 0


def main() -> None:
    sys.exit(cli_main())
