#!/usr/bin/env python3
"""
Basic githubstars usage example.

Runs offline: a mock search client stands in for the API and the snapshot
store lives in memory.
Run with: python examples/basic_usage.py
"""

from githubstars import NoBaseline, QueryIdentity, QueryOrchestrator, SnapshotStore, compare
from githubstars.report import render_report
from githubstars.testing import MockGitHubClient, create_mock_search_repository

print("=== githubstars Basic Usage Example ===\n")

identity = QueryIdentity(language="go", stars=">1000")

# 1. Snapshot naming
print("1. Snapshot naming...")
print(f"   Search query:  {identity.search_query}")
print(f"   Snapshot name: {identity.snapshot_name}")
assert identity.snapshot_name == "gogr1000"

print("\n   OK: Naming working\n")

# 2. Record a baseline
print("2. Recording a baseline...")
client = MockGitHubClient()
client.search.configure_repositories(response=[
    create_mock_search_repository("octo/alpha", 100, "fast web framework"),
    create_mock_search_repository("octo/beta", 100, "fast database driver"),
])

with SnapshotStore.from_url("sqlite://") as store:
    snapshot = QueryOrchestrator(client, store).record(identity)
    print(f"   Stored {len(snapshot)} repositories in {snapshot.name}/{snapshot.collection}")

    # 3. Compare a later run against it
    print("\n3. Comparing a later run...")
    client.search.configure_repositories(response=[
        create_mock_search_repository("octo/alpha", 130),
        create_mock_search_repository("octo/beta", 95),
    ])
    result = QueryOrchestrator(client, store).show(identity)
    print(render_report(result.report, result.captured_at))

print("\n   OK: Comparison working\n")

# 4. Missing baselines are reported, not computed
print("4. Missing baseline...")
try:
    compare({"octo/alpha": 1}, None)
except NoBaseline as e:
    print(f"   Caught NoBaseline: {e}")

print("\n=== Done ===")
