"""githubstars type definitions.

This module exports all data model types used by the package.
"""

from githubstars.types.deltas import DeltaRecord, DeltaReport, RankedDelta, Summary
from githubstars.types.repos import SearchRepository, SearchResult
from githubstars.types.snapshots import MetricRecord, Snapshot

__all__ = [
    # Search types
    "SearchRepository",
    "SearchResult",
    # Snapshot types
    "MetricRecord",
    "Snapshot",
    # Delta types
    "DeltaRecord",
    "RankedDelta",
    "Summary",
    "DeltaReport",
]
