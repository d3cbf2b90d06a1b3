"""Delta and summary data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeltaRecord:
    """Star change for a title present in both baseline and current results."""

    title: str
    baseline_value: int
    current_value: int

    @property
    def delta(self) -> int:
        return self.current_value - self.baseline_value


@dataclass(frozen=True)
class RankedDelta:
    """A title paired with its delta, used for most/least gained."""

    title: str
    delta: int


@dataclass(frozen=True)
class Summary:
    """Aggregate statistics over a sequence of deltas.

    ``most_gained``, ``least_gained`` and ``average_delta`` are None when
    ``count`` is zero.
    """

    most_gained: RankedDelta | None
    least_gained: RankedDelta | None
    total_delta: int
    average_delta: int | None
    count: int

    @property
    def has_data(self) -> bool:
        return self.count > 0


@dataclass(frozen=True)
class DeltaReport:
    """Result of comparing current results against a baseline snapshot."""

    baseline_name: str
    deltas: tuple[DeltaRecord, ...]
    summary: Summary
