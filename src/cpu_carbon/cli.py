"""Command-line utilities for cpu_carbon."""

from __future__ import annotations

import argparse
import logging
import sys

from .config_loader import apply_cli_overrides, load_config
from .errors import InvalidInputError
from .estimation import estimate_co2_breakdown
from .estimation.reporting import describe_estimate
from .logging_setup import configure_logging
from .schemas import CO2EstimateRecord
from .settings import get_settings

LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpu-carbon",
        description="Estimate CO2 emissions (grams) for a quantity of CPU time.",
    )
    parser.add_argument(
        "cpu_seconds",
        type=float,
        help="CPU time in seconds. Must be greater than zero.",
    )
    parser.add_argument(
        "--cpu-power-kw",
        type=float,
        default=None,
        help="Processor power draw in kilowatts (default 0.05).",
    )
    parser.add_argument(
        "--carbon-intensity",
        type=float,
        default=None,
        help="Grid carbon intensity in gCO2/kWh (default 475.0).",
    )
    parser.add_argument(
        "--config",
        "-c",
        help="Path to a JSON or YAML configuration file.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the estimate breakdown as a JSON object.",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Quiet mode: suppress output, just return exit code.",
    )
    parser.add_argument(
        "--log-level",
        help="Log level name (defaults to CPU_CARBON_LOG_LEVEL or WARNING).",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit log records as JSON lines on stderr.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Estimate CO2 emissions for CPU time and print the result."""
    parser = _build_parser()

    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:  # pragma: no cover - controlled via tests
        exit_code = int(exc.code) if isinstance(exc.code, int) else 1
        return 0 if exit_code == 0 else 1

    settings = get_settings()
    configure_logging(args.log_level or settings.log_level, structured=args.log_json)

    try:
        config = apply_cli_overrides(
            load_config(args.config, settings=settings),
            cpu_power_kw=args.cpu_power_kw,
            carbon_intensity=args.carbon_intensity,
        )
        LOGGER.debug(
            "Resolved overrides",
            extra={
                "cpu_power_kw": config.cpu_power_kw,
                "carbon_intensity": config.carbon_intensity,
            },
        )
        estimate = estimate_co2_breakdown(args.cpu_seconds, config)
    except InvalidInputError as exc:
        if not args.quiet:
            print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not args.quiet:
        if args.json:
            record = CO2EstimateRecord.from_estimate(estimate)
            print(record.model_dump_json())
        else:
            print(describe_estimate(estimate.grams))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
