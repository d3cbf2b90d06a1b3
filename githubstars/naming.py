"""
Snapshot naming.

Derives the storage name of a snapshot set from the query that produced it.
Comparison operators are not valid in storage names, so the first ``>``
becomes ``gr`` and the first ``<`` becomes ``lo``; later occurrences are
left as they are.
"""

from dataclasses import dataclass

_ESCAPES = ((">", "gr"), ("<", "lo"))


def encode_snapshot_name(language: str = "", query: str = "", stars: str = "") -> str:
    """
    Build the snapshot set name for a query.

    Example:
        ```python
        encode_snapshot_name("go", "", ">1000")  # "gogr1000"
        encode_snapshot_name("", "", ">100>200")  # "gr100>200"
        ```

    Args:
        language: Repository language filter
        query: Free-text search terms
        stars: Star-count filter (e.g. ">1000", "10..20")

    Returns:
        Storage name; empty string when every part is empty
    """
    name = f"{language}{query}{stars}"
    for operator, replacement in _ESCAPES:
        name = name.replace(operator, replacement, 1)
    return name


@dataclass(frozen=True)
class QueryIdentity:
    """The (language, query, stars) tuple that addresses one snapshot set."""

    language: str = ""
    query: str = ""
    stars: str = ""

    @property
    def snapshot_name(self) -> str:
        return encode_snapshot_name(self.language, self.query, self.stars)

    @property
    def search_query(self) -> str:
        """Query string for the repository search endpoint."""
        parts = []
        if self.query:
            parts.append(self.query)
        if self.language:
            parts.append(f"language:{self.language}")
        if self.stars:
            parts.append(f"stars:{self.stars}")
        return " ".join(parts)


__all__ = ["QueryIdentity", "encode_snapshot_name"]
