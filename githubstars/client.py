"""
githubstars search provider client.

Provides the primary interface for querying the repository search API.
"""

from typing import Any

from githubstars.clients import SearchClient
from githubstars.config import DEFAULT_API_URL, DEFAULT_TIMEOUT, Settings
from githubstars.transport import HTTPTransport


class GitHubClient:
    """
    Client for the repository search API.

    Example:
        ```python
        from githubstars import GitHubClient

        client = GitHubClient(token="ghp_...")

        # Or create from environment variables
        client = GitHubClient.from_env()

        result = client.search.repositories("language:go stars:>1000")
        ```
    """

    DEFAULT_BASE_URL = DEFAULT_API_URL
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: API token (optional; unauthenticated requests are rate limited harder)
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
        )

        self.search = SearchClient(self._transport)

    @classmethod
    def from_env(cls, settings: Settings | None = None) -> "GitHubClient":
        """
        Create a client from environment variables.

        See Settings.from_env for the variables read.

        Args:
            settings: Already loaded settings (optional)

        Returns:
            Configured GitHubClient instance

        Raises:
            ConfigurationError: If an environment variable is invalid
        """
        settings = settings or Settings.from_env()
        return cls(
            token=settings.token,
            base_url=settings.api_url,
            timeout=settings.timeout,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
