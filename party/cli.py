"""Command-line interface for the party greeter."""

import logging
import sys

import click

from party import __version__
from party.adapters import ConsoleGreeter, InMemoryVisitorLister
from party.config import LOG_LEVELS, ConfigError, PartyConfig, load_config
from party.model import Category, LookupFailure
from party.workflow import GreetingWorkflow


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_config_or_exit(path: str | None) -> PartyConfig:
    try:
        return load_config(path)
    except ConfigError as e:
        click.echo(f"Config error: {e}", err=True)
        sys.exit(2)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# ---------------------------------------------------------------------------
# Click CLI
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(__version__, prog_name="party")
@click.option(
    "-c",
    "--config",
    "config_path",
    envvar="PARTY_CONFIG",
    help="Path to party.toml (default: ./party.toml)",
)
@click.pass_context
def cli(ctx, config_path):
    """Party greeter - greet your visitors, nice ones first."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@cli.command("greet")
@click.option(
    "--just-nice/--everyone",
    "just_nice",
    default=None,
    help="Greet only nice visitors (default: from config)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: from config)",
)
@click.pass_context
def greet(ctx, just_nice, log_level):
    """Greet the configured visitors."""
    config = _load_config_or_exit(ctx.obj["config_path"])
    _configure_logging(log_level or config.log_level)
    if just_nice is None:
        just_nice = config.just_nice

    workflow = GreetingWorkflow(
        visitor_lister=InMemoryVisitorLister.from_config(config),
        greeter=ConsoleGreeter(template=config.greeting),
    )
    try:
        workflow.greet_visitors(just_nice=just_nice)
    except LookupFailure as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command("guests")
@click.option(
    "--category",
    type=click.Choice([c.value for c in Category]),
    default=None,
    help="Only list one category",
)
@click.pass_context
def guests(ctx, category):
    """List the configured visitors."""
    config = _load_config_or_exit(ctx.obj["config_path"])
    categories = [Category.parse(category)] if category else list(Category)
    for cat in categories:
        for visitor in config.guests.get(cat, []):
            click.echo(f"{cat.value}: {visitor.full_name}")


def main() -> None:
    """Main CLI entry point (delegates to click)."""
    cli()


if __name__ == "__main__":
    main()
