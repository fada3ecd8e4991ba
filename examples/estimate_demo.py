"""Example script printing default and custom CPU carbon estimates."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from cpu_carbon.errors import InvalidInputError
from cpu_carbon.estimation import EstimationConfig, estimate_co2
from cpu_carbon.estimation.reporting import describe_estimate


def main(argv: Optional[list[str]] = None) -> int:
    """Print estimates for one hour of CPU time with and without overrides."""
    parser = argparse.ArgumentParser(
        description="Compare the default CO2 estimate with a custom configuration."
    )
    parser.add_argument("--cpu-seconds", type=float, default=3600.0)
    parser.add_argument("--cpu-power-kw", type=float, default=0.08)
    parser.add_argument("--carbon-intensity", type=float, default=300.0)
    args = parser.parse_args(argv)

    custom = EstimationConfig(
        cpu_power_kw=args.cpu_power_kw,
        carbon_intensity=args.carbon_intensity,
    )
    try:
        default_grams = estimate_co2(args.cpu_seconds)
        custom_grams = estimate_co2(args.cpu_seconds, custom)
    except InvalidInputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(describe_estimate(default_grams))
    print(describe_estimate(custom_grams, label="custom config"))
    return 0


if __name__ == "__main__":  # pragma: no cover - example entry point
    raise SystemExit(main())
