"""Parameter-set CLI commands: show, validate, dump."""

from __future__ import annotations

from pathlib import Path

import click

from eqparams.cli.config_cmd import settings_or_exit
from eqparams.config.schema import LoaderSettings
from eqparams.errors import ParameterError
from eqparams.params.model import EquilibriumParameterSet
from eqparams.params.reader import load, load_named


def _load_source(source: str, settings: LoaderSettings) -> EquilibriumParameterSet:
    """Load ``source`` as a file path, or as a named set if no such file."""
    path = Path(source).expanduser()
    if path.is_file():
        return load(path)
    return load_named(source, settings)


def _load_or_exit(
    ctx: click.Context, source: str
) -> tuple[EquilibriumParameterSet, LoaderSettings]:
    settings = settings_or_exit(ctx)
    try:
        return _load_source(source, settings), settings
    except (ParameterError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None


@click.command("show")
@click.argument("source")
@click.pass_context
def show_cmd(ctx: click.Context, source: str) -> None:
    """Print a summary of the parameter set at SOURCE (path or name)."""
    from eqparams.output.summary import format_summary

    params, settings = _load_or_exit(ctx, source)
    click.echo(format_summary(params, settings))


@click.command("validate")
@click.argument("sources", nargs=-1, required=True)
@click.pass_context
def validate_cmd(ctx: click.Context, sources: tuple[str, ...]) -> None:
    """Check one or more parameter sets; exit 1 if any is invalid."""
    settings = settings_or_exit(ctx)

    failed = 0
    for source in sources:
        try:
            params = _load_source(source, settings)
        except (ParameterError, FileNotFoundError) as e:
            failed += 1
            click.echo(f"  FAIL  {source}: {e}", err=True)
            continue
        click.echo(f"  OK    {source} ({params.equilibrium_kind.value}, "
                   f"R_0={params.major_radius:g})")

    if failed:
        click.echo(f"{failed} of {len(sources)} parameter sets invalid.", err=True)
        raise SystemExit(1)
    click.echo(f"All {len(sources)} parameter sets valid.")


@click.command("dump")
@click.argument("source")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "yaml"]),
    default="json",
    show_default=True,
    help="Output format",
)
@click.pass_context
def dump_cmd(ctx: click.Context, source: str, fmt: str) -> None:
    """Print the normalized parameter set at SOURCE."""
    from eqparams.params.reader import dumps

    params, _ = _load_or_exit(ctx, source)
    click.echo(dumps(params, fmt=fmt), nl=False)
