"""Word frequency tally over repository descriptions."""

from collections import Counter
from collections.abc import Iterable, Iterator


class WordTally:
    """Counts whitespace-separated words across repository descriptions."""

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()

    def add(self, description: str) -> None:
        """Count the words of one description."""
        self._counts.update(word for word in description.split() if word)

    def add_all(self, descriptions: Iterable[str]) -> None:
        for description in descriptions:
            self.add(description)

    def count(self, word: str) -> int:
        return self._counts[word]

    def popular(self, min_length: int = 3, min_count: int = 2) -> Iterator[tuple[str, int]]:
        """
        Yield frequent words, most frequent first.

        Words of equal frequency keep the order in which they were first seen.

        Args:
            min_length: Shortest word to report (default: 3)
            min_count: Fewest occurrences to report (default: 2)

        Yields:
            (word, count) pairs
        """
        for word, count in self._counts.most_common():
            if count >= min_count and len(word) >= min_length:
                yield word, count

    def clear(self) -> None:
        self._counts.clear()

    def __len__(self) -> int:
        return len(self._counts)
