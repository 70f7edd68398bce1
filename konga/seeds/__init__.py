"""Centralized seed data for database initialization.

All default records a Konga deployment starts with are defined here. Writing them
to storage is left to the importing application.
"""

from konga.seeds.kong_nodes import KONG_NODE_SEED, build_kong_node_seed, seed_rows

__all__ = [
    # Kong Nodes
    "KONG_NODE_SEED",
    "build_kong_node_seed",
    "seed_rows",
]
