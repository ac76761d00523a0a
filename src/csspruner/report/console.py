"""Plain-text report for terminals."""

from __future__ import annotations

from csspruner.classify import REASONS
from csspruner.model.result import AnalysisResult
from csspruner.model.selector import Verdict
from csspruner.report.format import format_bytes, group_by_file

TOP_UNUSED = 20


def render_console(result: AnalysisResult) -> str:
    stats = result.stats
    lines = [
        "CSS Analysis Report",
        "=" * 50,
        "",
        "Summary:",
        f"  Total CSS files:    {stats.total_css_files}",
        f"  Total source files: {stats.total_source_files}",
        f"  Total selectors:    {stats.total_selectors}",
        f"  Used selectors:     {stats.used_selectors}",
        f"  Unused selectors:   {stats.unused_selectors}",
        f"  Potential savings:  {format_bytes(result.potential_savings)}",
        f"  Usage rate:         {stats.usage_rate:.1f}%",
        f"  Analysis time:      {stats.duration_ms}ms",
    ]

    if result.unused_selectors:
        lines += ["", "Unused selectors:"]
        largest = sorted(result.unused_selectors, key=lambda s: s.size, reverse=True)
        for selector in largest[:TOP_UNUSED]:
            lines.append(f"  - {selector.selector} ({format_bytes(selector.size)})")
            lines.append(f"    {selector.file}:{selector.line}:{selector.column}")
            lines.append(f"    Reason: {selector.reason}")
        hidden = len(result.unused_selectors) - TOP_UNUSED
        if hidden > 0:
            lines.append(f"  ... and {hidden} more unused selectors")

        lines += ["", "By file:"]
        for file, selectors in group_by_file(result.unused_selectors).items():
            size = sum(s.size for s in selectors)
            lines.append(f"  {file}: {len(selectors)} unused ({format_bytes(size)})")

    lines += ["", "Recommendations:"]
    lines.extend(f"  {r}" for r in recommendations(result))
    return "\n".join(lines)


def recommendations(result: AnalysisResult) -> list[str]:
    if not result.unused_selectors:
        return ["No unused CSS found."]
    savings_kb = result.potential_savings / 1024
    if savings_kb > 50:
        advice = [f"High impact: remove unused CSS to save {format_bytes(result.potential_savings)}."]
    elif savings_kb > 10:
        advice = [f"Medium impact: consider removing unused CSS to save {format_bytes(result.potential_savings)}."]
    else:
        advice = [f"Low impact: {format_bytes(result.potential_savings)} can be saved."]
    if result.stats.total_selectors and result.stats.unused_selectors / result.stats.total_selectors > 0.5:
        advice.append("More than half of all selectors are unused; review the stylesheet architecture.")
    not_found = REASONS[Verdict.NOT_FOUND_IN_SOURCE]
    if any(s.reason == not_found for s in result.unused_selectors):
        advice.append("Some selectors may be built dynamically; whitelist them if they are.")
    advice.append("Run 'csspruner clean' to remove them; every file is backed up first.")
    return advice
