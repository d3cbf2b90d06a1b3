"""Repository search data models."""

from dataclasses import dataclass


@dataclass
class SearchRepository:
    """A repository returned by the search provider."""

    title: str  # "owner/name"
    star_count: int
    description: str = ""


@dataclass
class SearchResult:
    """Response from the repository search endpoint (single page)."""

    total_count: int
    incomplete_results: bool
    repositories: list[SearchRepository]

    def star_counts(self) -> dict[str, int]:
        """Return an ordered mapping of repository title to star count."""
        return {repo.title: repo.star_count for repo in self.repositories}

    def __len__(self) -> int:
        return len(self.repositories)
