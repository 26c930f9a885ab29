"""Tests for plain-text statistics reports."""

from topicount import AnalysisResult
from topicount._report import format_detailed, format_statistics, save_statistics


def test_format_statistics():
    assert format_statistics({"medical": 2, "finance": 0}) == (
        "medical : 2\nfinance : 0\n"
    )


def test_format_detailed():
    result = AnalysisResult(
        counts_by_topic={"networks": 2, "finance": 0},
        detailed={"networks": {"сеть": 2}, "finance": {}},
    )
    text = format_detailed(result)
    assert "=== NETWORKS ===" in text
    assert "  сеть" in text and ": 2" in text
    assert "=== FINANCE ===\n  (no matches)" in text


def test_save_statistics(tmp_path):
    path = save_statistics({"a": 1}, tmp_path / "statistics.txt")
    assert path.read_text(encoding="utf-8") == "a : 1\n"
