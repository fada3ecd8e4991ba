"""Human-readable formatting helpers kept apart from the core estimator."""

from __future__ import annotations


def format_grams(grams: float) -> str:
    """Render grams with two decimals."""

    return f"{grams:.2f}"


def describe_estimate(grams: float, *, label: str | None = None) -> str:
    """Build the one-line summary printed by the CLI and demo."""

    prefix = "Estimated CO2 emissions"
    if label:
        prefix = f"{prefix} ({label})"
    return f"{prefix}: {format_grams(grams)} grams"
