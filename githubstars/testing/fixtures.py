"""
Pytest fixtures for githubstars testing.
"""

from datetime import datetime, timezone
from typing import Generator

import pytest

from githubstars.store import SnapshotStore
from githubstars.testing.mock import MockGitHubClient
from githubstars.types.repos import SearchRepository, SearchResult
from githubstars.types.snapshots import MetricRecord, Snapshot


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.search.configure_repositories(response=[...])
            result = my_function(mock_client)
            assert mock_client.was_called("search.repositories")
        ```
    """
    client = MockGitHubClient()
    yield client
    client.reset()


# ============================================================================
# Storage Fixtures
# ============================================================================


@pytest.fixture
def snapshot_store() -> Generator[SnapshotStore, None, None]:
    """Provide a SnapshotStore backed by an in-memory SQLite database."""
    store = SnapshotStore.from_url("sqlite://")
    yield store
    store.close()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_search_result() -> SearchResult:
    """Provide a sample SearchResult with three repositories."""
    repositories = [
        create_mock_search_repository("octo/alpha", 150, "A fast web framework"),
        create_mock_search_repository("octo/beta", 90, "A fast database driver"),
        create_mock_search_repository("octo/gamma", 40, "Command line tools"),
    ]
    return SearchResult(
        total_count=len(repositories),
        incomplete_results=False,
        repositories=repositories,
    )


@pytest.fixture
def sample_snapshot() -> Snapshot:
    """Provide a sample baseline Snapshot."""
    return create_mock_snapshot(
        {"octo/alpha": 100, "octo/beta": 100, "octo/delta": 10},
    )


@pytest.fixture
def mock_client_with_results(
    mock_client: MockGitHubClient,
    sample_search_result: SearchResult,
) -> MockGitHubClient:
    """Provide a mock client whose searches return sample_search_result."""
    mock_client.search.configure_repositories(response=sample_search_result)
    return mock_client


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_search_repository(
    title: str = "octo/repo",
    star_count: int = 0,
    description: str = "",
) -> SearchRepository:
    """
    Create a SearchRepository with customizable fields.

    Args:
        title: Repository full name
        star_count: Star count
        description: Repository description

    Returns:
        SearchRepository object
    """
    return SearchRepository(title=title, star_count=star_count, description=description)


def create_mock_snapshot(
    values: dict[str, int],
    name: str = "test-snapshot",
    collection: str = "stars1",
    captured_at: datetime | None = None,
) -> Snapshot:
    """
    Create a Snapshot from a title to star count mapping.

    Args:
        values: Ordered mapping of title to star count
        name: Snapshot set name
        collection: Collection name
        captured_at: Capture time (default: 2024-01-15 10:30 UTC)

    Returns:
        Snapshot object
    """
    return Snapshot(
        name=name,
        collection=collection,
        captured_at=captured_at or datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc),
        records=tuple(MetricRecord(title, value) for title, value in values.items()),
    )


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "mock_client",
    "snapshot_store",
    "sample_search_result",
    "sample_snapshot",
    "mock_client_with_results",
    # Helper functions
    "create_mock_search_repository",
    "create_mock_snapshot",
]
