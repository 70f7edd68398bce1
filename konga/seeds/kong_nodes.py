"""Default Kong node seed data.

A fresh Konga install points at a single Kong node reachable as ``kong`` on the
compose network.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from konga.core.clock import Clock, to_iso8601, utc_now
from konga.core.logging_config import get_logger
from konga.core.models import AdminTargetRecord

logger = get_logger(__name__)

DEFAULT_KONG_NODES: Tuple[Dict[str, Any], ...] = (
    {
        "name": "kong-gateway",
        "type": "default",
        "admin_url": "http://kong:8001",
        "health_checks_enabled": True,
        "health_check_details_enabled": True,
        "version_tag": "3.4.x",
        "active": True,
    },
)


def build_kong_node_seed(clock: Clock = utc_now) -> Tuple[AdminTargetRecord, ...]:
    """
    Build the Kong node seed records.

    The clock is read once, so every record of a single build shares one
    timestamp for both ``created_at`` and ``updated_at``.

    Args:
        clock: Time source for the timestamps.

    Returns:
        The records in seed order.
    """
    now = to_iso8601(clock())
    records = tuple(
        AdminTargetRecord(**node, created_at=now, updated_at=now) for node in DEFAULT_KONG_NODES
    )
    logger.debug("Built %d kong node seed record(s) stamped %s", len(records), now)
    return records


def seed_rows(records: Optional[Sequence[AdminTargetRecord]] = None) -> List[Dict[str, Any]]:
    """
    Render seed records as storage rows keyed by column name.

    Args:
        records: Records to render. Defaults to ``KONG_NODE_SEED``.

    Returns:
        One dict per record, in the given order.
    """
    return [record.to_row() for record in (KONG_NODE_SEED if records is None else records)]


KONG_NODE_SEED: Tuple[AdminTargetRecord, ...] = build_kong_node_seed()
