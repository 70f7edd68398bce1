"""Domain models for konga."""

from __future__ import annotations

from .admin_target import AdminTargetRecord

__all__ = ["AdminTargetRecord"]
