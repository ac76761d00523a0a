"""csspruner CLI entry point: Click group with subcommands."""

import logging

import click

from csspruner import __version__


@click.group()
@click.version_option(version=__version__, prog_name="csspruner")
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for debug output)")
def cli(verbose: int) -> None:
    """csspruner - find and remove unused CSS selectors."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from csspruner.cli.analyze import analyze  # noqa: E402
from csspruner.cli.clean import clean  # noqa: E402
from csspruner.cli.init import init  # noqa: E402

cli.add_command(analyze)
cli.add_command(clean)
cli.add_command(init)
