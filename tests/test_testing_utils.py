"""
Tests for githubstars testing utilities.

Verifies that MockGitHubClient and fixtures work correctly.
"""

import pytest

from githubstars.exceptions import InvalidQueryError
from githubstars.store import SnapshotStore
from githubstars.testing import (
    MockGitHubClient,
    create_mock_search_repository,
    create_mock_snapshot,
)
from githubstars.types.repos import SearchResult
from githubstars.types.snapshots import Snapshot


class TestMockGitHubClient:
    """Tests for MockGitHubClient."""

    def test_default_response_is_empty(self) -> None:
        mock = MockGitHubClient()

        result = mock.search.repositories("language:go")

        assert result.repositories == []
        assert result.total_count == 0

    def test_configured_list_response(self) -> None:
        mock = MockGitHubClient()
        repo = create_mock_search_repository("octo/repo", 42)
        mock.search.configure_repositories(response=[repo])

        result = mock.search.repositories("anything")

        assert result.repositories == [repo]
        assert result.total_count == 1

    def test_configured_errors(self) -> None:
        mock = MockGitHubClient()
        mock.search.configure_repositories(
            error=InvalidQueryError("INVALID_QUERY", "Validation Failed")
        )

        with pytest.raises(InvalidQueryError) as exc_info:
            mock.search.repositories("stars:>>")

        assert exc_info.value.code == "INVALID_QUERY"

    def test_call_tracking(self) -> None:
        mock = MockGitHubClient()

        mock.search.repositories("language:go")
        mock.search.repositories("language:rust", sort="updated")

        assert mock.was_called("search.repositories")
        assert mock.call_count("search.repositories") == 2
        calls = mock.get_calls("search.repositories")
        assert calls[1].args == ("language:rust",)
        assert calls[1].kwargs == {"sort": "updated"}
        assert len(mock.get_calls()) == 2

    def test_reset(self) -> None:
        mock = MockGitHubClient()
        mock.search.configure_repositories(response=[create_mock_search_repository()])
        mock.search.repositories("q")

        mock.reset()

        assert not mock.was_called("search.repositories")
        assert mock.search.repositories("q").repositories == []

    def test_context_manager(self) -> None:
        with MockGitHubClient() as mock:
            assert mock.search.repositories("q") is not None


class TestFixtures:
    """Tests for the pytest fixtures."""

    def test_mock_client_with_results(self, mock_client_with_results: MockGitHubClient) -> None:
        result = mock_client_with_results.search.repositories("q")

        assert [r.title for r in result.repositories] == ["octo/alpha", "octo/beta", "octo/gamma"]

    def test_sample_search_result(self, sample_search_result: SearchResult) -> None:
        assert sample_search_result.star_counts()["octo/alpha"] == 150

    def test_sample_snapshot(self, sample_snapshot: Snapshot) -> None:
        assert sample_snapshot.as_mapping() == {"octo/alpha": 100, "octo/beta": 100, "octo/delta": 10}

    def test_snapshot_store_starts_empty(self, snapshot_store: SnapshotStore) -> None:
        assert list(snapshot_store.list_sets()) == []


class TestHelperFunctions:
    """Tests for helper functions."""

    def test_create_mock_search_repository(self) -> None:
        repo = create_mock_search_repository("octo/repo", 5, "description")

        assert repo.title == "octo/repo"
        assert repo.star_count == 5
        assert repo.description == "description"

    def test_create_mock_snapshot(self) -> None:
        snapshot = create_mock_snapshot({"b": 2, "a": 1}, name="set", collection="weekly")

        assert [r.title for r in snapshot.records] == ["b", "a"]
        assert snapshot.name == "set"
        assert snapshot.collection == "weekly"
        assert snapshot.captured_at.tzinfo is not None
