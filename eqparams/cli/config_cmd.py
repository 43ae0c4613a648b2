"""Settings CLI command, plus the settings loader shared by all commands."""

from __future__ import annotations

import json

import click
import yaml
from pydantic import ValidationError

from eqparams.config.loader import load_settings
from eqparams.config.schema import LoaderSettings


def settings_or_exit(ctx: click.Context) -> LoaderSettings:
    """Load settings for a command; a bad settings file exits with status 1."""
    try:
        return load_settings(ctx.obj.get("config_path"))
    except (ValidationError, yaml.YAMLError) as e:
        click.echo(f"Settings validation failed: {e}", err=True)
        raise SystemExit(1) from None


@click.command("settings")
@click.pass_context
def settings_cmd(ctx: click.Context) -> None:
    """Print the resolved loader settings."""
    settings = settings_or_exit(ctx)
    click.echo(json.dumps(settings.model_dump(), indent=2, default=str))
