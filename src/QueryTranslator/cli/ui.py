"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from QueryTranslator.cli.runner import CommandRunner
from QueryTranslator.config import load_config_with_defaults

DEFAULT_CONFIG_PATH = Path("config/default.yml")


@click.group(
    help=(
        "QueryTranslator: translate search syntax into Elasticsearch boolean queries. "
        "Use '--' before a query that starts with '-'."
    )
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="YAML config merged over config/default.yml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.
    """
    load_dotenv()
    ctx.obj = load_config_with_defaults(config_path or DEFAULT_CONFIG_PATH, DEFAULT_CONFIG_PATH)


@cli.command("translate")
@click.argument("query")
@click.option("--compact", is_flag=True, help="Print the document on a single line.")
@click.pass_context
def translate_cmd(ctx: click.Context, query: str, compact: bool) -> None:
    """Print the boolean query document for QUERY as JSON."""
    runner = CommandRunner(ctx.obj)
    click.echo(runner.run_translate(ctx.command.name, query, compact=compact))


@cli.command("explain")
@click.argument("query")
@click.pass_context
def explain_cmd(ctx: click.Context, query: str) -> None:
    """Show how QUERY is split into should/must/must_not clauses."""
    click.echo(CommandRunner(ctx.obj).run_explain(ctx.command.name, query), nl=False)


@cli.command("search")
@click.argument("query")
@click.pass_context
def search_cmd(ctx: click.Context, query: str) -> None:
    """Run QUERY against the configured backend index."""
    click.echo(CommandRunner(ctx.obj).run_search(ctx.command.name, query), nl=False)


@cli.command("index")
@click.argument("documents", type=click.Path(path_type=Path, dir_okay=False, exists=True))
@click.pass_context
def index_cmd(ctx: click.Context, documents: Path) -> None:
    """Recreate the backend index and load DOCUMENTS (YAML or JSON list)."""
    CommandRunner(ctx.obj).run_index(ctx.command.name, documents)
