"""
Timeline Analysis Models
app/models/timeline.py
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from app.models.common import CamelModel, DataSource, LandscapeResponse


class TimelinePoint(CamelModel):
    """Long-format fact flattened from the owner x year pivot."""
    owner: str
    year: int
    count: int = Field(..., gt=0)


class YearTotal(CamelModel):
    year: int
    count: int = Field(default=0, ge=0)


class OwnerTotal(CamelModel):
    owner: str
    total: int = Field(default=0, ge=0)


class TimelineHeatmap(CamelModel):
    owners: List[str] = Field(default_factory=list)
    years: List[int] = Field(default_factory=list)
    matrix: List[List[int]] = Field(default_factory=list)  # rows follow owners, columns follow years


class TimelineSummary(CamelModel):
    total_filings: int = 0
    owner_count: int = 0
    first_year: Optional[int] = None
    last_year: Optional[int] = None
    peak_year: Optional[int] = None
    peak_year_count: int = 0


class TimelineData(CamelModel):
    owner_key: str
    years: List[int] = Field(default_factory=list)
    points: List[TimelinePoint] = Field(default_factory=list)
    year_totals: List[YearTotal] = Field(default_factory=list)
    top_owners: List[OwnerTotal] = Field(default_factory=list)
    heatmap: TimelineHeatmap = Field(default_factory=TimelineHeatmap)
    summary: TimelineSummary = Field(default_factory=TimelineSummary)
    sources: List[DataSource] = Field(default_factory=list)


class TimelineResponse(LandscapeResponse):
    data: Optional[TimelineData] = None
