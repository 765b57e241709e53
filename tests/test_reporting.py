from __future__ import annotations

import io
from datetime import datetime, timedelta, timezone
from pathlib import Path
from string import Template

from randsuite.analysis import SummaryReport
from randsuite.app import RunResult
from randsuite.reporting import (
    build_markdown_report,
    display_score,
    print_console_summary,
    write_markdown_report,
)
from randsuite.tests.base import TestReport as RawReport


def _result(*, warnings: tuple[str, ...] = ()) -> RunResult:
    test_report = RawReport(
        name="average",
        message="An uniform PRNG should provide an average value of (MIN_VALUE + MAX_VALUE) / 2",
        is_random_probability=0.998,
        metrics={"actual_average": 0.501},
    )
    summary_report = SummaryReport(
        name="average",
        message="Arithmetic mean of the randomness probability of every test",
        is_random_probability=0.998,
        metrics={"tests": 1.0},
    )
    return RunResult(
        source="python generator (seed 3)",
        config_path=Path("config.ini"),
        total_values=2048,
        overall_confidence=0.998,
        is_random=True,
        confidence_threshold=0.99,
        test_reports=(test_report,),
        summary_reports=(summary_report,),
        started_at=datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc),
        duration=timedelta(milliseconds=250),
        warnings=warnings,
    )


def test_console_summary_is_one_line_by_default() -> None:
    stream = io.StringIO()

    print_console_summary(_result(), stream=stream)

    assert stream.getvalue() == "Result: RANDOM | Confidence: 99.8%\n"


def test_verbose_console_summary_lists_reports_and_warnings() -> None:
    stream = io.StringIO()

    print_console_summary(_result(warnings=("Weights normalised.",)), verbose=True, stream=stream)

    output = stream.getvalue()
    assert "Source: python generator (seed 3) (2048 values)" in output
    assert " - average [test]: 99.8%" in output
    assert " - average [summary]: 99.8%" in output
    assert "actual_average: 0.501" in output
    assert "Warning: Weights normalised." in output
    assert "Threshold: 99.00%" in output


def test_markdown_report_contains_sections() -> None:
    content = build_markdown_report(_result())

    assert content.startswith("# Randomness Suite Report")
    assert "- **Result:** RANDOM" in content
    assert "- **Values:** 2048" in content
    assert "- **Configuration:** config.ini" in content
    assert "| Name | Score (%) | Assumption |" in content
    assert "| average | 99.80 |" in content
    assert "### average" in content
    assert "- No additional notes were recorded." in content
    assert "_Generated on 2024-05-06T07:08:09+00:00 (duration: 250 ms)._" in content


def test_markdown_report_with_custom_template() -> None:
    template = Template("${summary}|${duration}")

    content = build_markdown_report(_result(), template=template)

    assert content.endswith("|250 ms")


def test_write_markdown_report_creates_directories(tmp_path: Path) -> None:
    target = write_markdown_report(_result(), tmp_path / "reports" / "run.md")

    assert target.exists()
    assert "## Test Results" in target.read_text(encoding="utf-8")


def test_display_score_clamps_without_changing_report() -> None:
    report = RawReport(name="chi_squared", message="m", is_random_probability=-3.0)

    assert display_score(report) == 0.0
    assert report.is_random_probability == -3.0
