"""Reporting utilities for console and markdown output."""

from __future__ import annotations

import sys
import textwrap
from dataclasses import dataclass
from datetime import timezone
from pathlib import Path
from string import Template
from typing import Sequence, TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from datetime import timedelta
    from .app import RunResult
    from .tests.base import Report


@dataclass(frozen=True)
class ReportTemplate:
    """Container for the markdown report template."""

    template: Template = Template(
        textwrap.dedent(
            """
            # Randomness Suite Report

            ## Summary
            ${summary}

            ## Sample
            ${sample}

            ## Test Results
            ${test_table}

            ## Summaries
            ${summary_table}
            ${metrics}
            ## Notes
            ${notes}

            _Generated on ${timestamp} (duration: ${duration})._
            """
        ).strip()
    )


DEFAULT_TEMPLATE = ReportTemplate()


def print_console_summary(result: "RunResult", *, verbose: bool = False, stream: TextIO | None = None) -> None:
    """Print a short summary of the run to ``stream``."""

    output = stream if stream is not None else sys.stdout
    status = "RANDOM" if result.is_random else "NON-RANDOM"
    print(f"Result: {status} | Confidence: {result.overall_confidence * 100:.1f}%", file=output)
    if not verbose:
        return

    print(f"Source: {result.source} ({result.total_values} values)", file=output)
    for report in result.reports:
        print(f" - {report.name} [{report.kind}]: {display_score(report) * 100:.1f}%", file=output)
        print(f"   {report.message}", file=output)
        for key, value in report.metrics.items():
            print(f"   {key}: {value:.6g}", file=output)
    for warning in result.warnings:
        print(f"Warning: {warning}", file=output)
    print(f"Threshold: {result.confidence_threshold * 100:.2f}%", file=output)


def build_markdown_report(result: "RunResult", *, template: Template | None = None) -> str:
    """Generate a markdown report for ``result`` using ``template``."""

    template = template or DEFAULT_TEMPLATE.template
    return template.substitute(
        summary=_format_summary_section(result),
        sample=_format_sample_section(result),
        test_table=_format_report_table(result.test_reports, "_(no tests executed)_"),
        summary_table=_format_report_table(result.summary_reports, "_(no summaries executed)_"),
        metrics=_format_metrics(result.reports),
        notes=_format_notes(result.warnings),
        timestamp=result.started_at.astimezone(timezone.utc).isoformat(),
        duration=_format_duration(result.duration),
    )


def write_markdown_report(
    result: "RunResult",
    path: Path,
    *,
    template: Template | None = None,
) -> Path:
    """Render and persist a markdown report for ``result``."""

    target = Path(path).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    content = build_markdown_report(result, template=template)
    target.write_text(content, encoding="utf-8")
    return target


def display_score(report: "Report") -> float:
    """Clamp a score into ``[0, 1]`` for display; the report keeps the raw value."""

    return max(0.0, min(1.0, report.is_random_probability))


# ---------------------------------------------------------------------------
# Helper formatting utilities
# ---------------------------------------------------------------------------

def _format_summary_section(result: "RunResult") -> str:
    verdict = "RANDOM" if result.is_random else "NON-RANDOM"
    return textwrap.dedent(
        f"""
        - **Result:** {verdict}
        - **Confidence:** {result.overall_confidence * 100:.2f}%
        - **Confidence threshold:** {result.confidence_threshold * 100:.2f}%
        """
    ).strip()


def _format_sample_section(result: "RunResult") -> str:
    lines = [
        f"- **Source:** {result.source}",
        f"- **Values:** {result.total_values}",
    ]
    if result.config_path is not None:
        lines.append(f"- **Configuration:** {result.config_path}")
    return "\n".join(lines)


def _format_report_table(reports: Sequence["Report"], empty: str) -> str:
    header = "| Name | Score (%) | Assumption |"
    separator = "| --- | --- | --- |"
    rows = [
        f"| {report.name} | {display_score(report) * 100:.2f} | {report.message} |"
        for report in reports
    ]
    if not rows:
        rows.append(f"| {empty} | - | - |")
    return "\n".join([header, separator, *rows])


def _format_metrics(reports: Sequence["Report"]) -> str:
    sections: list[str] = []
    for report in reports:
        if not report.metrics:
            continue
        section_lines = [f"### {report.name}"]
        section_lines.extend(f"- `{key}`: {value:.6g}" for key, value in report.metrics.items())
        sections.append("\n".join(section_lines))
    if not sections:
        return ""
    return "\n" + "\n\n".join(sections) + "\n"


def _format_notes(warnings: Sequence[str]) -> str:
    if not warnings:
        return "- No additional notes were recorded."
    return "\n".join(f"- {note}" for note in warnings)


def _format_duration(duration: "timedelta") -> str:
    total_seconds = duration.total_seconds()
    if total_seconds < 1:
        return f"{total_seconds * 1000:.0f} ms"
    return f"{total_seconds:.2f} s"


__all__ = [
    "DEFAULT_TEMPLATE",
    "ReportTemplate",
    "build_markdown_report",
    "display_score",
    "print_console_summary",
    "write_markdown_report",
]
