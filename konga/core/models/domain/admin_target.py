"""Domain model for a gateway node's administrative connection details."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import Field

from ..base import BaseSchema


class AdminTargetRecord(BaseSchema):
    """
    One administrative target: a Kong node Konga can manage.

    Field aliases are the column names of Konga's ``kong_nodes`` table, so a record
    can be built from a storage row and rendered back into one with
    ``to_row()``. Timestamps are ISO-8601 strings stamped by whoever builds the
    record; this model does not generate them.
    """

    name: str
    type: str = "default"

    admin_url: str = Field(alias="kong_admin_url")
    health_checks_enabled: bool = Field(alias="health_checks")
    health_check_details_enabled: bool = Field(alias="health_check_details")
    version_tag: str = Field(alias="kong_version")

    active: bool
    created_at: str
    updated_at: str

    def to_row(self) -> Dict[str, Any]:
        """Render the record keyed by storage column names."""
        return self.model_dump(by_alias=True)
