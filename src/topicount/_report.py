"""Plain-text statistics reports."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from ._types import AnalysisResult


def format_statistics(counts: Mapping[str, int]) -> str:
    """One ``topic : count`` line per topic."""
    return "".join(f"{topic} : {count}\n" for topic, count in counts.items())


def format_detailed(result: AnalysisResult) -> str:
    """Per-topic sections listing every matched entry and its count."""
    lines: list[str] = []
    for topic, entries in result.detailed.items():
        lines.append(f"=== {topic.upper()} ===")
        if not entries:
            lines.append("  (no matches)")
        for entry, count in entries.items():
            lines.append(f"  {entry:<30} : {count}")
        lines.append("")
    return "\n".join(lines)


def save_statistics(counts: Mapping[str, int], path: Path | str) -> Path:
    path = Path(path)
    path.write_text(format_statistics(counts), encoding="utf-8")
    return path
