"""githubstars - track repository star counts between search runs."""

from githubstars.client import GitHubClient
from githubstars.config import Settings
from githubstars.delta import compare
from githubstars.exceptions import (
    AuthenticationError,
    ConfigurationError,
    EmptyResultSet,
    GitHubStarsError,
    InvalidQueryError,
    NoBaseline,
    NotFoundError,
    ProviderFailure,
    RateLimitedError,
    ServerError,
    StorageFailure,
)
from githubstars.logging import configure_logging, get_logger
from githubstars.naming import QueryIdentity, encode_snapshot_name
from githubstars.orchestrator import QueryOrchestrator, RunState, ShowResult
from githubstars.report import render_report
from githubstars.store import SnapshotStore
from githubstars.transport import HTTPTransport

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Clients
    "GitHubClient",
    "HTTPTransport",
    # Configuration
    "Settings",
    # Naming
    "QueryIdentity",
    "encode_snapshot_name",
    # Storage
    "SnapshotStore",
    # Deltas
    "compare",
    "render_report",
    # Orchestration
    "QueryOrchestrator",
    "RunState",
    "ShowResult",
    # Exceptions
    "GitHubStarsError",
    "ConfigurationError",
    "ProviderFailure",
    "AuthenticationError",
    "NotFoundError",
    "InvalidQueryError",
    "RateLimitedError",
    "ServerError",
    "StorageFailure",
    "NoBaseline",
    "EmptyResultSet",
    # Logging
    "configure_logging",
    "get_logger",
]
