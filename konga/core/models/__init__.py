"""Core models and schemas for konga."""

from __future__ import annotations

from .base import BaseSchema
from .domain import AdminTargetRecord

__all__ = [
    "BaseSchema",
    "AdminTargetRecord",
]
