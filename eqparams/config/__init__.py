"""Loader settings: loading, validation, and defaults."""

from eqparams.config.loader import load_settings
from eqparams.config.schema import LoaderSettings

__all__ = ["load_settings", "LoaderSettings"]
