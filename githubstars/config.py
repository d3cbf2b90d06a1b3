"""
githubstars configuration.

Settings are read from environment variables.
"""

import os
from dataclasses import dataclass

from githubstars.exceptions import ConfigurationError

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_DATABASE_URL = "sqlite:///githubstars.db"
DEFAULT_COLLECTION = "stars1"


@dataclass
class Settings:
    """Runtime settings for the search provider and snapshot store."""

    token: str | None = None
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    database_url: str = DEFAULT_DATABASE_URL
    collection: str = DEFAULT_COLLECTION

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Create settings from environment variables.

        Environment variables:
            GITHUB_TOKEN: API token for the search provider (optional)
            GITHUB_API_URL: Base URL for the search API (optional, default: https://api.github.com)
            GITHUBSTARS_TIMEOUT: Request timeout in seconds (optional, default: 30)
            GITHUBSTARS_DATABASE_URL: SQLAlchemy URL of the snapshot store
                (optional, default: sqlite:///githubstars.db)
            GITHUBSTARS_COLLECTION: Default snapshot collection (optional, default: stars1)

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        raw_timeout = os.environ.get("GITHUBSTARS_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid GITHUBSTARS_TIMEOUT: {raw_timeout!r}. Must be a number of seconds"
                ) from None
            if timeout <= 0:
                raise ConfigurationError("GITHUBSTARS_TIMEOUT must be greater than zero")

        collection = os.environ.get("GITHUBSTARS_COLLECTION", DEFAULT_COLLECTION)
        if not collection:
            raise ConfigurationError("GITHUBSTARS_COLLECTION must not be empty")

        return cls(
            token=os.environ.get("GITHUB_TOKEN") or None,
            api_url=os.environ.get("GITHUB_API_URL", DEFAULT_API_URL),
            timeout=timeout,
            database_url=os.environ.get("GITHUBSTARS_DATABASE_URL", DEFAULT_DATABASE_URL),
            collection=collection,
        )
