"""Snapshot data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MetricRecord:
    """One repository's star count at capture time."""

    title: str
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Star count for {self.title!r} must be >= 0, got {self.value}")


@dataclass(frozen=True)
class Snapshot:
    """A named, complete, point-in-time capture of star counts."""

    name: str
    collection: str
    captured_at: datetime
    records: tuple[MetricRecord, ...]

    def as_mapping(self) -> dict[str, int]:
        """Return an ordered mapping of title to star count."""
        return {record.title: record.value for record in self.records}

    def __len__(self) -> int:
        return len(self.records)
