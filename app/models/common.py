"""
Shared API Models
app/models/common.py

Base model and envelope pieces used by every landscape endpoint.
JSON keys are camelCase to match the dashboard client.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes snake_case fields under camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DataSource(CamelModel):
    """Which file satisfied a dataset, and how many rows it produced."""
    dataset: str
    directory: str
    filename: Optional[str] = None
    found: bool = False
    records: int = Field(default=0, ge=0)
    error: Optional[str] = None


class LandscapeResponse(CamelModel):
    """Envelope fields shared by all four analysis endpoints."""
    success: bool = True
    error: Optional[str] = None
