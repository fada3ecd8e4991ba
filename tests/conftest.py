"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator

import pytest

# Ensure src/ is on sys.path for tests so the src layout is used during test runs
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

_ENV_VARS = (
    "CPU_CARBON_CPU_POWER_KW",
    "CPU_CARBON_CARBON_INTENSITY",
    "CPU_CARBON_CONFIG_PATH",
    "CPU_CARBON_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> Iterator[None]:
    """Keep host environment variables and config files out of each test."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    yield


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers the CLI installs so captured streams are not reused."""

    yield
    logger = logging.getLogger("cpu_carbon")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
