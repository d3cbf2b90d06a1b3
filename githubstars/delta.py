"""
Star delta computation.

Compares a current result set against a stored baseline snapshot. Only
titles present in both take part; titles seen on one side only are left out
of the deltas and the summary alike. Deltas keep the baseline's stored order.
"""

from collections.abc import Mapping

from githubstars.exceptions import NoBaseline
from githubstars.types.deltas import DeltaRecord, DeltaReport, RankedDelta, Summary
from githubstars.types.snapshots import Snapshot


def _truncating_average(total: int, count: int) -> int:
    """Integer average rounded toward zero."""
    quotient = abs(total) // count
    return -quotient if total < 0 else quotient


def compare(current: Mapping[str, int], baseline: Snapshot | None) -> DeltaReport:
    """
    Compare current star counts against a baseline snapshot.

    Ties for most gained keep the first title in baseline order; ties for
    least gained keep the last one.

    Example:
        ```python
        report = compare({"octo/repo": 130}, baseline)
        report.deltas[0].delta        # 30
        report.summary.average_delta  # 30
        ```

    Args:
        current: Mapping of repository title to current star count
        baseline: Stored snapshot, or None if there is none

    Returns:
        DeltaReport with per-title deltas and their summary

    Raises:
        NoBaseline: If baseline is None
    """
    if baseline is None:
        raise NoBaseline()

    deltas: list[DeltaRecord] = []
    most: RankedDelta | None = None
    least: RankedDelta | None = None
    total = 0

    for record in baseline.records:
        if record.title not in current:
            continue

        entry = DeltaRecord(
            title=record.title,
            baseline_value=record.value,
            current_value=current[record.title],
        )
        diff = entry.delta
        total += diff

        if most is None or diff > most.delta:
            most = RankedDelta(entry.title, diff)
        if least is None or least.delta >= diff:
            least = RankedDelta(entry.title, diff)

        deltas.append(entry)

    count = len(deltas)
    summary = Summary(
        most_gained=most,
        least_gained=least,
        total_delta=total,
        average_delta=_truncating_average(total, count) if count else None,
        count=count,
    )
    return DeltaReport(baseline_name=baseline.name, deltas=tuple(deltas), summary=summary)


__all__ = ["compare"]
