"""
Classification Analysis Models
app/models/classification.py

Owner and year aggregates are plain dict rows because their classification
columns are chosen from the data (top codes by total), e.g.

    {"currentOwner": "Equinor ASA", "total": 41, "E21B": 17, "G01V": 9}
    {"year": 2019, "E21B": 12, "G01V": 4}
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from app.models.common import CamelModel, DataSource, LandscapeResponse


class ClassificationTotal(CamelModel):
    classification: str
    total: int = Field(default=0, ge=0)


class ClassificationData(CamelModel):
    ipc_full: List[ClassificationTotal] = Field(default_factory=list)
    cpc_full: List[ClassificationTotal] = Field(default_factory=list)
    ipc_by_owner: List[Dict[str, Any]] = Field(default_factory=list)
    cpc_by_owner: List[Dict[str, Any]] = Field(default_factory=list)
    ipc_owner_columns: List[str] = Field(default_factory=list)
    cpc_owner_columns: List[str] = Field(default_factory=list)
    ipc_by_year: List[Dict[str, Any]] = Field(default_factory=list)
    cpc_by_year: List[Dict[str, Any]] = Field(default_factory=list)
    sources: List[DataSource] = Field(default_factory=list)


class ClassificationResponse(LandscapeResponse):
    data: Optional[ClassificationData] = None
