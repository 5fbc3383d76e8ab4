"""CLI entry point for media-pricing."""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Optional

import click

from media_pricing import __version__
from media_pricing.commands.registry import discover_and_register_commands, run_command
from media_pricing.errors import InvalidConfiguration
from media_pricing.model import (
    DownloadService,
    MultimediaContent,
    PremiumContent,
    RegisteredUser,
    StandardContent,
    StreamingService,
)

# Dynamically discover and import all command modules
discover_and_register_commands()


class ContentParamType(click.ParamType):
    """Parses NAME=STREAMING,DOWNLOAD[,FEE] into a (name, content) pair.

    Two prices give a StandardContent, a third one (the additional fee)
    gives a PremiumContent.
    """

    name = "content"

    def convert(
        self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]
    ) -> tuple[str, MultimediaContent]:
        if isinstance(value, tuple):
            return value

        name, separator, prices = value.partition("=")
        name = name.strip()
        if not separator or not name:
            self.fail(f"{value!r} is not in NAME=STREAMING,DOWNLOAD[,FEE] format", param, ctx)

        parts = [part.strip() for part in prices.split(",")]
        if len(parts) not in (2, 3):
            self.fail(f"{value!r} needs two prices and an optional fee", param, ctx)

        amounts = []
        for part in parts:
            try:
                amount = Decimal(part)
            except InvalidOperation:
                self.fail(f"{part!r} is not a number in {value!r}", param, ctx)
            if not amount.is_finite():
                self.fail(f"{part!r} is not a finite number in {value!r}", param, ctx)
            amounts.append(amount)

        if len(amounts) == 3:
            return name, PremiumContent(*amounts)
        return name, StandardContent(*amounts)


CONTENT = ContentParamType()


class AnalysisError(click.ClickException):
    """A source file could not be analyzed.

    Exits with status 2; status 1 is reserved for files that contain type checks.
    """

    exit_code = 2


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log debug messages to stderr.")
def main(verbose: bool) -> None:
    """Media pricing - price streaming and download subscriptions.

    Also finds the type-checking conditionals that polymorphic pricing
    replaces.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.option(
    "--content",
    "contents",
    type=CONTENT,
    multiple=True,
    metavar="NAME=STREAMING,DOWNLOAD[,FEE]",
    help="Declare a content item; a fee makes it premium.",
)
@click.option("--stream", "streams", multiple=True, metavar="NAME", help="Subscribe to streaming NAME.")
@click.option(
    "--download", "downloads", multiple=True, metavar="NAME", help="Subscribe to downloading NAME."
)
def total(
    contents: tuple[tuple[str, MultimediaContent], ...],
    streams: tuple[str, ...],
    downloads: tuple[str, ...],
) -> None:
    """Print the total price of a user's subscriptions.

    Example:

        media-pricing total --content movie=10,8,2 --stream movie --download movie
    """
    catalog: dict[str, MultimediaContent] = {}
    for name, content in contents:
        if name in catalog:
            raise click.UsageError(f"Content {name!r} is declared more than once")
        catalog[name] = content

    def lookup(name: str) -> MultimediaContent:
        if name not in catalog:
            raise click.UsageError(f"Unknown content {name!r}; declare it with --content")
        return catalog[name]

    try:
        services = [StreamingService(lookup(name)) for name in streams]
        services += [DownloadService(lookup(name)) for name in downloads]
        user = RegisteredUser(services)
    except InvalidConfiguration as e:
        raise click.ClickException(str(e)) from e

    click.echo(str(user.get_total()))


@main.command("find-type-checks")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--min-branches",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Fewest type-checking branches a chain needs to be reported.",
)
@click.pass_context
def find_type_checks(ctx: click.Context, path: Path, min_branches: int) -> None:
    """Report if/elif chains that dispatch on isinstance() or type().

    Exits with status 1 when any chain is found and 2 when the file cannot
    be analyzed.
    """
    try:
        command = run_command("find-type-checks", path, min_branches=min_branches)
    except ValueError as e:
        raise AnalysisError(str(e)) from e

    findings = command.findings  # type: ignore[attr-defined]
    for finding in findings:
        subjects = ", ".join(f"'{subject}'" for subject in finding.subjects)
        click.echo(
            f"{path}:{finding.line}: {finding.owner} checks type of {subjects} "
            f"against {', '.join(finding.checked_types)}"
        )

    if findings:
        ctx.exit(1)
    click.echo("No type checks found.")
