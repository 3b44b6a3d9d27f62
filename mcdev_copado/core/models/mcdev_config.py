"""
mcdev project config (``.mcdev.json``) — only the parts this layer reads.

    {"credentials": {"<credential>": {"businessUnits": {"<bu>": <mid>}}}}

Entries are validated one credential at a time, so a broken entry only
affects lookups against that credential.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CredentialConfig(BaseModel):
    """One credential entry and the business units it can reach."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    business_units: dict[str, Any] | None = Field(default=None, alias="businessUnits")
