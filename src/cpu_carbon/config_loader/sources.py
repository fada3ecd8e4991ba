"""Configuration source utilities for :mod:`cpu_carbon.config_loader`."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import cast

import yaml

from cpu_carbon.settings import CpuCarbonSettings

LOGGER = logging.getLogger(__name__)

DEFAULT_CANDIDATES: tuple[Path, ...] = (
    Path("config/cpu_carbon.yml"),
    Path("configs/cpu_carbon.yml"),
    Path("config/cpu_carbon.json"),
    Path("configs/cpu_carbon.json"),
)


def load_structured_config(
    path: str | None, settings: CpuCarbonSettings
) -> dict[str, object] | None:
    """Load configuration data from disk.

    Args:
        path: Explicit configuration path provided by the caller.
        settings: Environment-derived settings used for fallback discovery.

    Returns:
        A dictionary representation of the configuration file when discovered,
        otherwise ``None``.
    """

    candidates: Iterable[Path]
    if path is not None:
        candidates = (Path(path),)
    elif settings.config_path:
        candidates = (Path(settings.config_path),)
    else:
        candidates = DEFAULT_CANDIDATES

    explicit = candidates is not DEFAULT_CANDIDATES
    for candidate in candidates:
        if explicit and not candidate.exists():
            LOGGER.warning("Configuration file %s does not exist", candidate)
            return None
        data = _load_config_file(candidate)
        if data is not None:
            LOGGER.debug("Loaded configuration from %s", candidate)
            return data
    return None


def _load_config_file(path: Path) -> dict[str, object] | None:
    """Load a configuration file based on its suffix.

    Args:
        path: Candidate configuration path.

    Returns:
        Parsed mapping when the file exists and is readable, otherwise
        ``None``.
    """

    if not path.exists():
        LOGGER.debug("Configuration candidate %s does not exist", path)
        return None
    suffix = path.suffix.lower()
    if suffix == ".json":
        return _load_json(path)
    if suffix in {".yml", ".yaml"}:
        return _load_yaml(path)
    LOGGER.warning("Unsupported configuration file type: %s", path)
    return None


def _load_json(path: Path) -> dict[str, object] | None:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        LOGGER.warning("Could not read configuration file %s: %s", path, exc)
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        LOGGER.warning("Ignoring malformed JSON configuration %s: %s", path, exc)
        return None
    return _normalize_mapping(data, path)


def _load_yaml(path: Path) -> dict[str, object] | None:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Could not read configuration file %s: %s", path, exc)
        return None
    except yaml.YAMLError as exc:
        LOGGER.warning("Ignoring malformed YAML configuration %s: %s", path, exc)
        return None
    return _normalize_mapping(data, path)


def _normalize_mapping(value: object, path: Path) -> dict[str, object] | None:
    """Restrict parsed content to a mapping with string keys.

    Args:
        value: Arbitrary Python object produced by JSON/YAML parsing.
        path: Source path, used for diagnostics.

    Returns:
        Mapping restricted to string keys when possible, otherwise ``None``.
    """

    if not isinstance(value, dict):
        LOGGER.warning("Configuration %s must contain a mapping at the top level", path)
        return None
    value_dict = cast(dict[object, object], value)
    return {key: item for key, item in value_dict.items() if isinstance(key, str)}
