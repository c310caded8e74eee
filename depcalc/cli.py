"""Click CLI: calculate upstream/downstream dependencies for modules."""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path

import click

from depcalc import __version__
from depcalc.errors import DepcalcError, InvalidArgumentError
from depcalc.loader import ROOT_ENV_VARS, find_root, load_resolver_config
from depcalc.models import LoaderConfig
from depcalc.reporter import report
from depcalc.resolver import Resolver


def _read_stdin_modules() -> list[str]:
    text = sys.stdin.read()
    return [m for m in re.split(r"\s+", text.strip()) if m]


@click.command()
@click.version_option(version=__version__)
@click.argument("modules", nargs=-1)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=list(ROOT_ENV_VARS),
    help="Repository root holding the module map",
)
@click.option("--component", "component_source", is_flag=True, help="Treat inputs as component names")
@click.option("--stdin", "from_stdin", is_flag=True, help="Read module names from standard input")
@click.option("--strict-rollups", is_flag=True, help="Fail when a module belongs to two rollups")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(
    modules: tuple[str, ...],
    as_json: bool,
    root: Path | None,
    component_source: bool,
    from_stdin: bool,
    strict_rollups: bool,
    verbose: bool,
):
    """depcalc: show what MODULES need and what depends on them."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        repo_root = find_root(root)
    except DepcalcError as e:
        raise click.ClickException(str(e))

    sources = _read_stdin_modules() if from_stdin else list(modules)
    if not sources:
        raise click.UsageError("No modules specified")

    try:
        config = load_resolver_config(
            LoaderConfig(root=repo_root),
            component_source=component_source,
            strict_rollups=strict_rollups,
        )
        tree = Resolver(config).resolve(sources)
    except InvalidArgumentError as e:
        raise click.UsageError(str(e))
    except DepcalcError as e:
        raise click.ClickException(str(e))

    report(tree, writer=click.echo, as_json=as_json)


if __name__ == "__main__":
    cli()
