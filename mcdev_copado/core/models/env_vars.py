"""
Environment variable payloads as Copado delivers them.

Copado hands over variables either as real JSON structures or as
JSON-encoded strings of the same structures.  Both shapes validate
into these models.  Values are carried through as-is.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EnvVar(BaseModel):
    """A single ``{name, value}`` variable."""

    model_config = ConfigDict(extra="ignore")

    name: str
    value: Any = None


class EnvChildVar(BaseModel):
    """Variables grouped under a parent record (e.g. a business unit).

    ``environment_variables`` stays raw (list, JSON string or None) and is
    normalized by the flat conversion.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    environment_variables: Any = Field(default=None, alias="environmentVariables")


class SourceProperty(BaseModel):
    """A Copado system property record."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    api_name: str = Field(alias="copado__API_Name__c")
    value: Any = Field(default=None, alias="copado__Value__c")
