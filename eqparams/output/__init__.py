"""Human-readable renderings of parameter sets."""

from eqparams.output.summary import format_summary

__all__ = ["format_summary"]
