"""githubstars exception classes."""


class GitHubStarsError(Exception):
    """Base exception for all githubstars errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GitHubStarsError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class ProviderFailure(GitHubStarsError):
    """Raised when the repository search call fails."""

    pass


class AuthenticationError(ProviderFailure):
    """Raised when the search provider rejects the token."""

    pass


class NotFoundError(ProviderFailure):
    """Raised when the search endpoint is not found."""

    pass


class InvalidQueryError(ProviderFailure):
    """Raised when the search provider cannot process the query."""

    pass


class RateLimitedError(ProviderFailure):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ServerError(ProviderFailure):
    """Raised on server errors (5xx)."""

    pass


class StorageFailure(GitHubStarsError):
    """Raised when the snapshot storage engine fails to read or write."""

    def __init__(self, message: str) -> None:
        super().__init__("STORAGE_FAILURE", message)


class NoBaseline(GitHubStarsError):
    """Raised when no stored snapshot exists to compare against."""

    def __init__(self, name: str | None = None, collection: str | None = None) -> None:
        self.name = name
        self.collection = collection
        if name is None:
            message = "No stored snapshot to compare against"
        else:
            where = f"{name}/{collection}" if collection else name
            message = f"No stored snapshot for {where!r}"
        super().__init__("NO_BASELINE", message)


class EmptyResultSet(GitHubStarsError):
    """Raised when the search provider returned no repositories."""

    def __init__(self, message: str = "Search returned no repositories") -> None:
        super().__init__("EMPTY_RESULT_SET", message)
