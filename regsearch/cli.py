"""regsearch CLI — search a container image registry from the terminal."""

import json
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from regsearch import __version__
from regsearch.errors import RegSearchError
from regsearch.search.table import RENDER_WIDTH, build_table

console = Console(width=RENDER_WIDTH, highlight=False)
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO; keep it for --verbose only
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.option(
    "--config",
    "config_file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Config file (default: $REGSEARCH_CONFIG or ~/.regsearch/config.yaml)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_file: str | None):
    """regsearch — search container image registries.

    Results are ranked by stars and printed as a table.
    """
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file


def build_service(config_file: str | None):
    """Wire the search pipeline to the real registry collaborators."""
    from regsearch.config import load_settings
    from regsearch.registry.auth import ConfigAuthResolver
    from regsearch.registry.client import HttpRegistryClient
    from regsearch.registry.index import parse_search_index_info
    from regsearch.search.service import SearchService

    settings = load_settings(config_file)
    return SearchService(
        index_parser=parse_search_index_info,
        auth_resolver=ConfigAuthResolver(settings),
        client=HttpRegistryClient(settings),
    )


# ── Search ───────────────────────────────────────────────────────────


@main.command()
@click.argument("term")
@click.option("--no-trunc", is_flag=True, help="Don't truncate output")
@click.option(
    "--filter",
    "-f",
    "filter_expr",
    default="",
    help="Use filters (is-automated, is-official, has-stars)",
)
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format",
)
@click.pass_context
def search(ctx: click.Context, term: str, no_trunc: bool, filter_expr: str, output_format: str):
    """Search the registry for images matching TERM.

    TERM may be prefixed with a registry host, e.g. localhost:5000/nginx.
    """
    try:
        service = build_service(ctx.obj.get("config_file"))
        results = service.search(term, filter_expr)
    except RegSearchError as e:
        raise click.ClickException(str(e)) from e

    if output_format == "json":
        click.echo(json.dumps([r.to_api() for r in results], indent=2))
    else:
        console.print(build_table(results, truncate_descriptions=not no_trunc))


if __name__ == "__main__":
    main()
