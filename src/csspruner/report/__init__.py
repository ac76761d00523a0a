"""Report renderers for analysis results."""

from __future__ import annotations

from pathlib import Path

from csspruner.model.result import AnalysisResult
from csspruner.report.console import render_console
from csspruner.report.format import format_bytes
from csspruner.report.json_report import render_json

RENDERERS = {
    "console": render_console,
    "json": render_json,
}


def write_report(
    result: AnalysisResult, fmt: str = "console", output_file: str | Path | None = None
) -> str:
    """Render *result* as *fmt*; also write it to *output_file* when given."""
    try:
        renderer = RENDERERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown report format: {fmt!r}") from None
    text = renderer(result)
    if output_file is not None:
        target = Path(output_file)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text + "\n", encoding="utf-8")
    return text


__all__ = ["render_console", "render_json", "format_bytes", "write_report", "RENDERERS"]
