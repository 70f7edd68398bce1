from __future__ import annotations

from datetime import datetime, timezone

import pytest


@pytest.fixture
def fixed_instant() -> datetime:
    """A fixed UTC instant with sub-millisecond precision, for clock injection."""
    return datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)
