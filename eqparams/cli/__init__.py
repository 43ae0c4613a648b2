"""Command-line interface for eqparams."""
