"""githubstars resource clients."""

from githubstars.clients.search import SearchClient

__all__ = [
    "SearchClient",
]
