"""
HTTP Transport for the repository search provider.

Handles HTTP communication, request logging and error handling. Requests
are made once; failures are raised as typed exceptions and never retried.
"""

import time
from typing import Any

import httpx

from githubstars.exceptions import (
    AuthenticationError,
    InvalidQueryError,
    NotFoundError,
    ProviderFailure,
    RateLimitedError,
    ServerError,
)
from githubstars.logging import log_http_request, log_http_response


class HTTPTransport:
    """
    HTTP transport layer for the search API.

    Handles:
    - Token authentication
    - Bounded request timeouts
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: API token sent as a bearer token (optional)
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "githubstars",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Make a GET request.

        Args:
            path: API path (e.g., "/search/repositories")
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            ProviderFailure: On API, network or timeout errors
        """
        return self.request("GET", path, params=params)

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Make a single request and parse the response.

        Args:
            method: HTTP method
            path: API path
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            ProviderFailure: On API, network or timeout errors
        """
        url = f"{self.base_url}{path}"
        log_http_request(method, url, params=params, headers=dict(self._client.headers))

        started = time.monotonic()
        try:
            response = self._client.request(method, path, params=params)
        except httpx.TimeoutException as e:
            raise ProviderFailure("TIMEOUT", f"Request to {url} timed out") from e
        except httpx.RequestError as e:
            raise ProviderFailure("CONNECTION_ERROR", str(e)) from e
        elapsed_ms = (time.monotonic() - started) * 1000

        if response.status_code >= 400:
            log_http_response(response.status_code, url, elapsed_ms=elapsed_ms)
            raise self._parse_error_response(response)

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderFailure("INVALID_RESPONSE", f"Response from {url} is not JSON") from e

        items = data.get("items") if isinstance(data, dict) else None
        log_http_response(
            response.status_code,
            url,
            item_count=len(items) if isinstance(items, list) else None,
            elapsed_ms=elapsed_ms,
        )
        return data

    def _parse_error_response(self, response: httpx.Response) -> ProviderFailure:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate ProviderFailure subclass
        """
        try:
            data = response.json()
        except Exception:
            data = {}
        if not isinstance(data, dict):
            data = {}

        message = data.get("message", f"HTTP {response.status_code}")
        errors = data.get("errors") or []
        details = [e.get("message") for e in errors if isinstance(e, dict) and e.get("message")]
        if details:
            message = f"{message}: {'; '.join(details)}"
        request_id = response.headers.get("X-GitHub-Request-Id")

        status_code = response.status_code

        if status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, request_id)
        elif status_code in (403, 429) and (
            status_code == 429 or response.headers.get("X-RateLimit-Remaining") == "0"
        ):
            return RateLimitedError(
                "RATE_LIMITED", message, self._retry_after(response), request_id
            )
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, request_id)
        elif status_code == 422:
            return InvalidQueryError("INVALID_QUERY", message, request_id)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, request_id)
        else:
            return ProviderFailure(f"HTTP_{status_code}", message, request_id)

    def _retry_after(self, response: httpx.Response) -> int:
        """Seconds until the rate limit resets, from Retry-After or X-RateLimit-Reset."""
        retry_after = response.headers.get("Retry-After")
        if retry_after:
            try:
                return int(retry_after)
            except ValueError:
                pass

        reset = response.headers.get("X-RateLimit-Reset")
        if reset:
            try:
                return max(0, int(reset) - int(time.time()))
            except ValueError:
                pass

        return 60
