"""githubstars testing utilities.

Provides a mock search client and fixtures for testing code built on githubstars.
"""

from githubstars.testing.fixtures import (
    create_mock_search_repository,
    create_mock_snapshot,
)
from githubstars.testing.mock import MockCall, MockGitHubClient, MockResponse

__all__ = [
    # Mock client
    "MockGitHubClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_search_repository",
    "create_mock_snapshot",
]
