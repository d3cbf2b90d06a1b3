"""
Query orchestration.

Sequences one search call, the snapshot store and the delta computation for
a single invocation. All per-run state lives in a RunState owned by the
orchestrator instance.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from githubstars.config import DEFAULT_COLLECTION
from githubstars.delta import compare
from githubstars.exceptions import EmptyResultSet, NoBaseline
from githubstars.logging import get_logger
from githubstars.naming import QueryIdentity
from githubstars.types.deltas import DeltaReport
from githubstars.types.repos import SearchRepository, SearchResult
from githubstars.types.snapshots import MetricRecord, Snapshot
from githubstars.words import WordTally

if TYPE_CHECKING:
    from githubstars.client import GitHubClient
    from githubstars.store import SnapshotStore

logger = get_logger()


@dataclass
class RunState:
    """Results gathered during one invocation."""

    identity: QueryIdentity | None = None
    snapshot_name: str = ""
    current: list[SearchRepository] = field(default_factory=list)
    words: WordTally = field(default_factory=WordTally)

    def current_counts(self) -> dict[str, int]:
        return {repo.title: repo.star_count for repo in self.current}


@dataclass
class ShowResult:
    """Outcome of comparing fresh results against the stored baseline."""

    snapshot_name: str
    collection: str
    captured_at: datetime | None
    report: DeltaReport | None
    notice: str | None = None


class QueryOrchestrator:
    """
    Drives search, snapshot storage and delta reporting.

    Example:
        ```python
        with GitHubClient.from_env() as client, SnapshotStore.from_url() as store:
            orchestrator = QueryOrchestrator(client, store)
            identity = QueryIdentity(language="go", stars=">1000")

            orchestrator.record(identity)        # store a baseline
            result = orchestrator.show(identity)  # later: compare against it
        ```
    """

    def __init__(
        self,
        client: "GitHubClient",
        store: "SnapshotStore",
        state: RunState | None = None,
        collection: str = DEFAULT_COLLECTION,
    ) -> None:
        self.client = client
        self.store = store
        self.state = state if state is not None else RunState()
        self.collection = collection

    def fetch(self, identity: QueryIdentity) -> SearchResult:
        """
        Run the search for a query and keep the results as current.

        Raises:
            ProviderFailure: If the search call fails
            EmptyResultSet: If nothing matched the query
        """
        result = self.client.search.repositories(identity.search_query, sort="stars")
        if not result.repositories:
            raise EmptyResultSet(f"No repositories match {identity.search_query!r}")

        self.state.identity = identity
        self.state.snapshot_name = identity.snapshot_name
        self.state.current = list(result.repositories)
        self.state.words.add_all(repo.description for repo in result.repositories)
        logger.info(
            "Fetched %d repositories for %r", len(result.repositories), identity.search_query
        )
        return result

    def show(self, identity: QueryIdentity, collection: str | None = None) -> ShowResult:
        """
        Fetch current results and compare them with the stored baseline.

        A missing baseline is not an error here: the result carries a notice
        and no report.
        """
        collection = collection or self.collection
        self.fetch(identity)
        name = self.state.snapshot_name

        baseline = self.store.read(name, collection)
        try:
            report = compare(self.state.current_counts(), baseline)
        except NoBaseline:
            logger.warning("db %s or collection %s not found", name, collection)
            return ShowResult(
                snapshot_name=name,
                collection=collection,
                captured_at=None,
                report=None,
                notice=f"No stored results for {name!r} yet; nothing to compare against",
            )

        logger.info("Summary...")
        return ShowResult(
            snapshot_name=name,
            collection=collection,
            captured_at=baseline.captured_at,
            report=report,
        )

    def record(self, identity: QueryIdentity, collection: str | None = None) -> Snapshot:
        """Fetch current results and store them as the new baseline."""
        self.fetch(identity)
        return self.commit(collection)

    def commit(self, collection: str | None = None) -> Snapshot:
        """
        Store the current results, replacing the collection in full.

        Raises:
            EmptyResultSet: If no results have been fetched
            StorageFailure: If the write fails
        """
        if not self.state.current:
            raise EmptyResultSet("Can't find current repositories for commit")

        collection = collection or self.collection
        logger.info("Store information")
        snapshot = self.store.write(
            self.state.snapshot_name,
            [MetricRecord(repo.title, repo.star_count) for repo in self.state.current],
            collection,
        )
        logger.info(
            "Committed %d repositories to %s/%s",
            len(snapshot),
            snapshot.name,
            snapshot.collection,
        )
        return snapshot

    def compare_with(self, name: str, collection: str | None = None) -> DeltaReport:
        """
        Compare the current results with another stored snapshot set.

        Raises:
            EmptyResultSet: If no results have been fetched
            NoBaseline: If the named snapshot does not exist
        """
        if not self.state.current:
            raise EmptyResultSet("No current repositories to compare; fetch results first")

        collection = collection or self.collection
        baseline = self.store.read(name, collection)
        if baseline is None:
            raise NoBaseline(name, collection)
        return compare(self.state.current_counts(), baseline)

    def available_results(self, identity: QueryIdentity) -> list[str]:
        """List the collections stored for a query."""
        return list(self.store.list_names(identity.snapshot_name))

    def popular_words(self, min_length: int = 3, min_count: int = 2) -> list[tuple[str, int]]:
        return list(self.state.words.popular(min_length=min_length, min_count=min_count))
