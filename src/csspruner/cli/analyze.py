"""CLI command: csspruner analyze -- report unused selectors without changing files."""

from __future__ import annotations

import click

from csspruner.cli.options import build_config, config_option, css_option, src_option
from csspruner.pruner import Pruner
from csspruner.report import format_bytes, write_report


@click.command()
@css_option
@src_option
@config_option
@click.option(
    "--format",
    "report_format",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Report format",
)
@click.option("-o", "--output", default=None, type=click.Path(), help="Write the report to a file")
def analyze(
    css: tuple[str, ...],
    src: tuple[str, ...],
    config_path: str | None,
    report_format: str | None,
    output: str | None,
) -> None:
    """Analyze CSS files and list selectors no source file references."""
    config = build_config(
        config_path, css, src, report_format=report_format, output_file=output
    )
    result = Pruner(config).analyze()

    text = write_report(result, config.report_format, config.output_file)
    if config.output_file:
        click.echo(f"Report saved to: {config.output_file}")
    else:
        click.echo(text)

    click.echo(f"Found {len(result.unused_selectors)} unused selectors", err=True)
    click.echo(f"Potential savings: {format_bytes(result.potential_savings)}", err=True)
