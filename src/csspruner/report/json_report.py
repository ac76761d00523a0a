"""JSON report for CI pipelines and other tooling."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from csspruner.model.result import AnalysisResult
from csspruner.report.format import format_bytes, group_by_file


def build_report(result: AnalysisResult) -> dict[str, object]:
    stats = result.stats
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "summary": {
            "totalCSSFiles": stats.total_css_files,
            "totalSourceFiles": stats.total_source_files,
            "totalSelectors": stats.total_selectors,
            "usedSelectors": stats.used_selectors,
            "unusedSelectors": stats.unused_selectors,
            "potentialSavings": result.potential_savings,
            "potentialSavingsFormatted": format_bytes(result.potential_savings),
            "usageRate": f"{stats.usage_rate:.2f}%",
            "analysisDuration": stats.duration_ms,
        },
        "unusedSelectors": [
            {**s.to_dict(), "sizeFormatted": format_bytes(s.size)} for s in result.unused_selectors
        ],
        "usedSelectors": [
            {"selector": s.selector, "file": s.file, "reason": s.reason}
            for s in result.used_selectors
        ],
        "fileBreakdown": file_breakdown(result),
    }


def file_breakdown(result: AnalysisResult) -> list[dict[str, object]]:
    unused = group_by_file(result.unused_selectors)
    used = group_by_file(result.used_selectors)
    rows = []
    for file in dict.fromkeys([*unused, *used]):
        unused_count = len(unused.get(file, []))
        used_count = len(used.get(file, []))
        unused_size = sum(s.size for s in unused.get(file, []))
        total = unused_count + used_count
        rows.append(
            {
                "file": file,
                "totalSelectors": total,
                "usedSelectors": used_count,
                "unusedSelectors": unused_count,
                "unusedSize": unused_size,
                "unusedSizeFormatted": format_bytes(unused_size),
                "usageRate": f"{used_count / total * 100:.2f}%" if total else "0%",
            }
        )
    rows.sort(key=lambda row: row["unusedSize"], reverse=True)
    return rows


def render_json(result: AnalysisResult) -> str:
    return json.dumps(build_report(result), indent=2)
