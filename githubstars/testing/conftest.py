"""
Pytest plugin for githubstars testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["githubstars.testing.conftest"]
"""

from githubstars.testing.fixtures import (
    mock_client,
    mock_client_with_results,
    sample_search_result,
    sample_snapshot,
    snapshot_store,
)

__all__ = [
    "mock_client",
    "mock_client_with_results",
    "sample_search_result",
    "sample_snapshot",
    "snapshot_store",
]
