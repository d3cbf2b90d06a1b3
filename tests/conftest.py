"""Shared fixtures for the githubstars test-suite."""

import logging

import pytest

from githubstars.testing.fixtures import (  # noqa: F401
    mock_client,
    mock_client_with_results,
    sample_search_result,
    sample_snapshot,
    snapshot_store,
)


@pytest.fixture(autouse=True)
def _quiet_package_logger():
    """Keep cli.main() from attaching a stderr handler during tests."""
    logger = logging.getLogger("githubstars")
    handler = logging.NullHandler()
    logger.addHandler(handler)
    yield
    logger.removeHandler(handler)
