"""Top-level CLI entry point for eqparams."""

from __future__ import annotations

import logging

import click

from eqparams import __version__


@click.group()
@click.version_option(version=__version__, prog_name="eqparams")
@click.option(
    "--config",
    type=click.Path(),
    default=None,
    envvar="EQPARAMS_CONFIG",
    help="Path to eqparams.yaml",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """eqparams -- load and check equilibrium parameter sets."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


# Register sub-commands
from eqparams.cli.config_cmd import settings_cmd  # noqa: E402
from eqparams.cli.params_cmd import dump_cmd, show_cmd, validate_cmd  # noqa: E402

cli.add_command(dump_cmd, "dump")
cli.add_command(settings_cmd, "settings")
cli.add_command(show_cmd, "show")
cli.add_command(validate_cmd, "validate")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
