"""CLI interface for karmalog — click-based commands."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from karmalog.aliases import AliasTable
from karmalog.bot import KarmaBot
from karmalog.config import KarmalogConfig, generate_config_toml
from karmalog.config.models import DEFAULT_CONFIG_PATH
from karmalog.models import FeedTarget
from karmalog.sinks.stdout import StdoutSink
from karmalog.sources.atom import FeedParseError
from karmalog.sources.base import TicketSource
from karmalog.sources.googlecode import parse_project_url


def parse_target_arg(value: str) -> FeedTarget:
    """Parse 'network/#channel' into a FeedTarget."""
    network, sep, channel = value.partition("/")
    if not sep or not network or not channel:
        msg = f"Invalid target: '{value}'. Use 'network/#channel'."
        raise click.BadParameter(msg)
    return FeedTarget(network, channel)


def _read_credits(path: Path | None, aliases: AliasTable) -> None:
    if path is None:
        return
    count = aliases.parse(path.read_text(encoding="utf-8"))
    click.echo(click.style(f"  {count} aliases loaded from {path}", dim=True), err=True)


@click.group()
@click.version_option(package_name="karmalog")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def cli(verbose: bool) -> None:
    """Karmalog — turn commit and ticket activity into IRC karma lines.

    Run 'karmalog init' to set up your configuration.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
def init() -> None:
    """Create default configuration at ~/.karmalog/config.toml."""
    config_path = DEFAULT_CONFIG_PATH
    if config_path.exists() and not click.confirm(
        f"Config already exists at {config_path}. Overwrite?"
    ):
        return

    config = KarmalogConfig()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_config_toml(config))

    click.echo(f"✓ Config created at: {config_path}")
    click.echo("Add [[feeds.googlecode]] entries for the projects to watch.")


@cli.command()
@click.argument("credits_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("names", nargs=-1)
def aliases(credits_file: Path, names: tuple[str, ...]) -> None:
    """Parse a CREDITS file and show how NAMES resolve."""
    table = AliasTable()
    count = table.parse(credits_file.read_text(encoding="utf-8"))
    click.echo(f"{count} aliases total")
    for name in names:
        click.echo(f"{name} -> {table.render(name)}")


@cli.command()
@click.argument("project")
@click.argument("feed_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--credits",
    "credits_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="CREDITS file for alias resolution",
)
def commits(project: str, feed_file: Path, credits_file: Path | None) -> None:
    """Render karma lines for every entry of an Atom FEED_FILE, oldest first."""
    bot = KarmaBot(KarmalogConfig(), sink=StdoutSink())
    _read_credits(credits_file, bot.aliases)
    try:
        bot.poll(project, feed_file.read_text(encoding="utf-8"))
    except FeedParseError as e:
        raise click.ClickException(str(e)) from None


@cli.command()
@click.argument("ticket")
@click.argument("action")
@click.option("--user", default=None, help="Who performed the action")
@click.option("--summary", default=None, help="Ticket summary")
@click.option("--prefix", default=None, help="Ticket label prefix (default 'Ticket #')")
@click.option("--url", default=None, help="Link to the ticket")
@click.option(
    "--credits",
    "credits_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="CREDITS file for alias resolution",
)
@click.option("--target", "targets", multiple=True, help="network/#channel (repeatable)")
def ticket(
    ticket: str,
    action: str,
    user: str | None,
    summary: str | None,
    prefix: str | None,
    url: str | None,
    credits_file: Path | None,
    targets: tuple[str, ...],
) -> None:
    """Render the karma line for a ticket state change.

    Example:

        karmalog ticket 699 closed --user jkeenan --summary "fix build"
    """
    table = AliasTable()
    _read_credits(credits_file, table)
    source = TicketSource(table, StdoutSink(show_targets=bool(targets)), prefix=prefix)
    source.output_ticket(
        [parse_target_arg(t) for t in targets],
        ticket=ticket,
        action=action,
        user=user,
        summary=summary,
        url=url,
    )


@cli.command()
def feeds() -> None:
    """List configured projects, their feed URLs and targets."""
    config = _load_config()
    for entry in config.feeds.googlecode:
        if parse_project_url(entry.url) is None:
            click.echo(click.style(f"  skipping unrecognised url {entry.url}", fg="yellow"))

    bot = KarmaBot(config)
    urls = bot.feed_urls()
    if not urls:
        click.echo("No feeds configured.")
        return
    for project, url in urls.items():
        targets = ", ".join(str(t) for t in bot.registry.targets(project))
        click.echo(f"{project}: {url} -> {targets}")


def _load_config() -> KarmalogConfig:
    """Load config, with helpful error message if missing."""
    from karmalog.config import load_config

    try:
        return load_config(DEFAULT_CONFIG_PATH)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from None
