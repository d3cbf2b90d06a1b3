"""
githubstars command line.

Usage:
    githubstars set --language go --stars ">1000"      # store a baseline
    githubstars show --language go --stars ">1000"     # compare with it
    githubstars show --language go --stars ">1000" --commit  # compare, then store
    githubstars compare gogr500 --language go --stars ">1000"
    githubstars list --language go --stars ">1000"
    githubstars words --language go --stars ">1000"
"""

import argparse
import logging
import sys
from contextlib import ExitStack
from typing import TYPE_CHECKING

from githubstars.client import GitHubClient
from githubstars.config import Settings
from githubstars.exceptions import GitHubStarsError
from githubstars.logging import configure_logging, get_logger
from githubstars.naming import QueryIdentity
from githubstars.orchestrator import QueryOrchestrator
from githubstars.report import render_popular_words, render_report
from githubstars.store import SnapshotStore
from githubstars.types.snapshots import Snapshot

if TYPE_CHECKING:
    from githubstars.testing.mock import MockGitHubClient


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="githubstars",
        description="Track repository star counts between runs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    query = argparse.ArgumentParser(add_help=False)
    query.add_argument("--language", default="", help="Repository language (e.g. go)")
    query.add_argument("--query", default="", help="Free-text search terms")
    query.add_argument("--stars", default="", help='Star filter (e.g. ">1000", "10..50")')
    query.add_argument(
        "--collection",
        default=None,
        help="Snapshot collection (default: GITHUBSTARS_COLLECTION or stars1)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    subparsers.required = True

    show_parser = subparsers.add_parser(
        "show",
        parents=[query],
        help="Compare current star counts with the stored snapshot",
    )
    show_parser.add_argument(
        "--commit",
        action="store_true",
        help="Store the compared results as the new snapshot afterwards",
    )
    subparsers.add_parser(
        "set",
        parents=[query],
        help="Store current star counts as the new snapshot",
    )
    compare_parser = subparsers.add_parser(
        "compare",
        parents=[query],
        help="Compare current star counts with another stored snapshot set",
    )
    compare_parser.add_argument("name", help="Snapshot set name to compare with")
    subparsers.add_parser(
        "list",
        parents=[query],
        help="List stored collections for the query",
    )
    words_parser = subparsers.add_parser(
        "words",
        parents=[query],
        help="Show frequent words in repository descriptions",
    )
    words_parser.add_argument(
        "--min-count",
        type=int,
        default=2,
        help="Fewest occurrences to report (default: 2)",
    )

    return parser


def _print_stored(snapshot: Snapshot) -> None:
    print(
        f"Stored {len(snapshot)} repositories in {snapshot.name}/{snapshot.collection} "
        f"at {snapshot.captured_at.isoformat(sep=' ', timespec='seconds')}"
    )


def run_command(args: argparse.Namespace, orchestrator: QueryOrchestrator) -> int:
    """Dispatch a parsed command. Errors propagate to main()."""
    identity = QueryIdentity(language=args.language, query=args.query, stars=args.stars)

    if args.command == "show":
        result = orchestrator.show(identity)
        if result.report is None:
            print(result.notice)
        else:
            print(render_report(result.report, result.captured_at))
        if args.commit:
            _print_stored(orchestrator.commit(result.collection))

    elif args.command == "set":
        _print_stored(orchestrator.record(identity))

    elif args.command == "compare":
        orchestrator.fetch(identity)
        report = orchestrator.compare_with(args.name)
        captured_at = orchestrator.store.captured_at(args.name, orchestrator.collection)
        print(render_report(report, captured_at))

    elif args.command == "list":
        for name in orchestrator.available_results(identity):
            print(name)

    elif args.command == "words":
        orchestrator.fetch(identity)
        print(render_popular_words(orchestrator.popular_words(min_count=args.min_count)))

    return 0


def main(
    argv: list[str] | None = None,
    client: "GitHubClient | MockGitHubClient | None" = None,
    store: SnapshotStore | None = None,
) -> int:
    """
    Entry point for the ``githubstars`` command.

    Args:
        argv: Command line arguments (default: sys.argv[1:])
        client: Search client to use instead of one built from the environment
        store: Snapshot store to use instead of one built from the environment

    Returns:
        Process exit status
    """
    args = create_parser().parse_args(argv)

    if not get_logger().handlers:
        configure_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        settings = Settings.from_env()
        with ExitStack() as stack:
            if client is None:
                client = stack.enter_context(GitHubClient.from_env(settings))
            if store is None:
                store = stack.enter_context(
                    SnapshotStore.from_url(settings.database_url, settings.collection)
                )
            orchestrator = QueryOrchestrator(
                client,
                store,
                collection=args.collection or settings.collection,
            )
            return run_command(args, orchestrator)
    except GitHubStarsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
