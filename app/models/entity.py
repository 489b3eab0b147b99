"""
Entity Analysis Models
app/models/entity.py
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from app.models.common import CamelModel, DataSource, LandscapeResponse


class AssigneeRecord(CamelModel):
    assignee: str
    country: Optional[str] = None
    count: int = Field(default=0, ge=0)


class InventorRecord(CamelModel):
    inventor: str
    country: Optional[str] = None
    count: int = Field(default=0, ge=0)


class EntityData(CamelModel):
    assignee_count: List[AssigneeRecord] = Field(default_factory=list)
    inventor_count: List[InventorRecord] = Field(default_factory=list)
    assignees: List[AssigneeRecord] = Field(default_factory=list)
    inventors: List[InventorRecord] = Field(default_factory=list)
    assignee_country: List[Dict[str, Any]] = Field(default_factory=list)
    inventor_country: List[Dict[str, Any]] = Field(default_factory=list)
    sources: List[DataSource] = Field(default_factory=list)


class EntityResponse(LandscapeResponse):
    data: Optional[EntityData] = None
