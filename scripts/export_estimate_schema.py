"""Export the cpu-carbon estimate record JSON Schema."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from cpu_carbon.schemas import CO2EstimateRecord, CURRENT_SCHEMA_VERSION


def main(argv: list[str] | None = None) -> None:
    """Write the JSON Schema for :class:`CO2EstimateRecord`."""

    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(__file__).resolve().parent.parent
        / f"estimate_schema_v{CURRENT_SCHEMA_VERSION}.json",
    )
    args = parser.parse_args(argv)

    schema = CO2EstimateRecord.model_json_schema()
    args.output.write_text(json.dumps(schema, indent=2), encoding="utf-8")


if __name__ == "__main__":
    main()
