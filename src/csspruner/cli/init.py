"""CLI command: csspruner init -- write a starter configuration file."""

from __future__ import annotations

from pathlib import Path

import click

from csspruner.config import CONFIG_FILES, write_sample_config


@click.command()
@click.option("-f", "--file", "filename", default=CONFIG_FILES[0], help="Config file name")
def init(filename: str) -> None:
    """Create a sample configuration file."""
    target = Path(filename)
    if target.exists():
        click.echo(f"Config file already exists: {target}")
        return
    write_sample_config(target)
    click.echo(f"Created config file: {target}")
