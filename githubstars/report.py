"""
Textual rendering of delta reports.

Each delta renders as ``<title> <baseline> <current> (+ <delta>)``, or
``(- <delta>)`` for losses; unchanged titles carry no suffix. A summary
block with most/fewest/total/average follows.
"""

from datetime import datetime

from githubstars.types.deltas import DeltaRecord, DeltaReport, RankedDelta, Summary

MOST_LABEL = "Most number of new stars"
FEWEST_LABEL = "Fewest number of new stars"
TOTAL_LABEL = "Total number of new stars"
AVERAGE_LABEL = "Average number of new starts"

NO_DATA = "no data"
UNDEFINED = "undefined"


def format_delta_line(delta: DeltaRecord) -> str:
    line = f"{delta.title} {delta.baseline_value} {delta.current_value}"
    if delta.delta > 0:
        return f"{line} (+ {delta.delta})"
    if delta.delta < 0:
        return f"{line} (- {-delta.delta})"
    return line


def _ranked(value: RankedDelta | None) -> str:
    if value is None:
        return NO_DATA
    return f"{value.title} {value.delta}"


def render_summary(summary: Summary) -> list[str]:
    average = UNDEFINED if summary.average_delta is None else str(summary.average_delta)
    return [
        f"{MOST_LABEL}: {_ranked(summary.most_gained)}",
        f"{FEWEST_LABEL}: {_ranked(summary.least_gained)}",
        f"{TOTAL_LABEL}: {summary.total_delta}",
        f"{AVERAGE_LABEL}: {average}",
    ]


def render_report(report: DeltaReport, captured_at: datetime | None = None) -> str:
    """
    Render a delta report as text.

    Args:
        report: Report to render
        captured_at: Capture time of the baseline, printed as a header when known

    Returns:
        Report text, one line per delta followed by the summary block
    """
    lines: list[str] = []
    if captured_at is not None:
        lines.append(f"Results for the time: {captured_at.isoformat(sep=' ', timespec='seconds')}")
        lines.append("")
    lines.extend(format_delta_line(delta) for delta in report.deltas)
    lines.append("")
    lines.extend(render_summary(report.summary))
    return "\n".join(lines)


def render_popular_words(words: list[tuple[str, int]]) -> str:
    return "\n".join(f"{word} {count}" for word, count in words)
