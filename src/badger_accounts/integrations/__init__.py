"""Upstream data source clients."""

from badger_accounts.integrations.subgraph import BadgerSubgraphClient

__all__ = [
    "BadgerSubgraphClient",
]
