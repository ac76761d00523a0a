"""CLI command: csspruner clean -- remove unused selectors in place."""

from __future__ import annotations

import click

from csspruner.cli.options import build_config, config_option, css_option, src_option
from csspruner.pruner import Pruner
from csspruner.report import format_bytes


@click.command()
@css_option
@src_option
@config_option
def clean(css: tuple[str, ...], src: tuple[str, ...], config_path: str | None) -> None:
    """Remove unused CSS rules. Each changed file is backed up first.

    Use 'analyze' to preview what would be removed.
    """
    config = build_config(config_path, css, src)
    result = Pruner(config).clean()

    click.echo(f"Removed {len(result.removed_selectors)} unused selectors")
    click.echo(f"Saved {format_bytes(result.bytes_saved)} ({result.bytes_saved} bytes)")
    for path in result.modified_files:
        click.echo(f"  modified: {path}")
    if result.backup_files:
        click.echo(f"Backup files created: {len(result.backup_files)}")
        for path in result.backup_files:
            click.echo(f"  {path}")
