"""Repository search resource client."""

from typing import TYPE_CHECKING

from githubstars.exceptions import ProviderFailure
from githubstars.logging import get_logger
from githubstars.types.repos import SearchRepository, SearchResult

if TYPE_CHECKING:
    from githubstars.transport import HTTPTransport

logger = get_logger()


class SearchClient:
    """Client for repository search."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the search client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def repositories(self, query: str, sort: str = "stars") -> SearchResult:
        """
        Search repositories.

        Only the first page of results is requested.

        Args:
            query: Search query (e.g. "language:go stars:>1000")
            sort: Sort field ("stars", "forks", "updated", default: "stars")

        Returns:
            SearchResult in the order returned by the provider

        Raises:
            InvalidQueryError: If the provider cannot parse the query
            ProviderFailure: On any other request failure, or a malformed response
        """
        logger.info("Request to Github...")
        response = self.transport.get(
            "/search/repositories",
            params={"q": query, "sort": sort},
        )

        if not isinstance(response, dict) or not isinstance(response.get("items", []), list):
            raise ProviderFailure(
                "INVALID_RESPONSE",
                "Search response is not an object with an 'items' list",
            )

        repositories = [self._parse_item(item) for item in response.get("items", [])]

        return SearchResult(
            total_count=response.get("total_count", len(repositories)),
            incomplete_results=response.get("incomplete_results", False),
            repositories=repositories,
        )

    @staticmethod
    def _parse_item(item: dict) -> SearchRepository:
        try:
            title = item["full_name"]
            star_count = item["stargazers_count"]
            description = item.get("description") or ""
        except (KeyError, TypeError, AttributeError) as e:
            raise ProviderFailure(
                "INVALID_RESPONSE", f"Malformed repository in search response: {e!r}"
            ) from e

        if not isinstance(title, str) or not title:
            raise ProviderFailure(
                "INVALID_RESPONSE", f"Repository has no usable full_name: {title!r}"
            )
        # bool is an int subclass
        if isinstance(star_count, bool) or not isinstance(star_count, int) or star_count < 0:
            raise ProviderFailure(
                "INVALID_RESPONSE",
                f"Repository {title!r} has invalid stargazers_count: {star_count!r}",
            )
        if not isinstance(description, str):
            description = str(description)

        return SearchRepository(title=title, star_count=star_count, description=description)
