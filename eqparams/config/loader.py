"""Loader settings: YAML file discovery, ${ENV_VAR} expansion, EQPARAMS_PATH."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from eqparams.config.defaults import SEARCH_PATH_ENV
from eqparams.config.schema import LoaderSettings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATHS = [
    Path("eqparams.yaml"),
    Path("~/.eqparams/config.yaml"),
]

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def _expand_env_vars(value: Any) -> Any:
    """Recursively expand ${ENV_VAR} references; unset variables become ''."""
    if isinstance(value, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    return value


def _find_settings_file(explicit_path: str | Path | None = None) -> Path | None:
    if explicit_path is not None:
        path = Path(explicit_path).expanduser()
        if path.is_file():
            return path
        logger.warning("Settings file not found: %s", path)
        return None

    for candidate in DEFAULT_SETTINGS_PATHS:
        resolved = candidate.expanduser()
        if resolved.is_file():
            return resolved
    return None


def _env_search_dirs() -> list[str]:
    """Directories from EQPARAMS_PATH, searched before the settings file's."""
    raw = os.environ.get(SEARCH_PATH_ENV, "")
    return [d for d in raw.split(os.pathsep) if d]


def load_settings(path: str | Path | None = None) -> LoaderSettings:
    """Load and validate loader settings.

    Resolution order:
    1. Explicit path argument
    2. eqparams.yaml in current directory
    3. ~/.eqparams/config.yaml
    4. All defaults (no file needed)

    Directories listed in ``EQPARAMS_PATH`` (os.pathsep-separated) are
    prepended to ``search_dirs``.
    """
    settings_path = _find_settings_file(path)

    raw: dict[str, Any] = {}
    if settings_path is not None:
        logger.info("Loading settings from %s", settings_path)
        with open(settings_path) as f:
            raw = _expand_env_vars(yaml.safe_load(f) or {})
    else:
        logger.info("No settings file found, using defaults")

    settings = LoaderSettings.model_validate(raw)

    extra = _env_search_dirs()
    if extra:
        logger.debug("Prepending %s directories: %s", SEARCH_PATH_ENV, extra)
        settings = settings.model_copy(update={"search_dirs": extra + settings.search_dirs})
    return settings


def resolve_path(path_str: str) -> Path:
    """Resolve a path from settings, expanding ~ and making absolute."""
    return Path(path_str).expanduser().resolve()
