"""Option handling shared by the analyze and clean commands."""

from __future__ import annotations

import sys

import click

from csspruner.config import PrunerConfig, load_config
from csspruner.errors import ConfigError


def build_config(
    config_path: str | None,
    css: tuple[str, ...],
    src: tuple[str, ...],
    **overrides: object,
) -> PrunerConfig:
    """Load the config file (if any) and layer command-line values on top.

    Exits with status 1 on configuration errors or when no CSS files are set.
    """
    try:
        config = load_config(config_path)
        config = config.with_overrides(
            css_files=css or None,
            source_directories=src or None,
            **overrides,
        )
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    if not config.css_files:
        click.echo("No CSS files specified. Use -c/--css or a config file.", err=True)
        sys.exit(1)
    return config


css_option = click.option(
    "-c", "--css", multiple=True, type=click.Path(), help="CSS file to process (repeatable)"
)
src_option = click.option(
    "-s", "--src", multiple=True, type=click.Path(), help="Source directory to scan (repeatable)"
)
config_option = click.option(
    "--config", "config_path", default=None, type=click.Path(), help="Configuration file path"
)
