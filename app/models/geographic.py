"""
Geographic Analysis Models
app/models/geographic.py
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from app.models.common import CamelModel, DataSource, LandscapeResponse


class CountryRecord(CamelModel):
    """One country row from a family or priority country export."""
    country_code: str
    country_name: str
    iso3: Optional[str] = None
    total: int = Field(default=0, ge=0)


class SpecialRegionRecord(CamelModel):
    """Patent office or treaty route (EP, WO, PCT) rather than a country."""
    code: str
    name: str
    total: int = Field(default=0, ge=0)


class CountryDataset(CamelModel):
    map: List[CountryRecord] = Field(default_factory=list)   # input order, for choropleths
    list: List[CountryRecord] = Field(default_factory=list)  # total descending, for tables


class GeographicData(CamelModel):
    family_data: CountryDataset = Field(default_factory=CountryDataset)
    priority_data: CountryDataset = Field(default_factory=CountryDataset)
    family_special_regions: List[SpecialRegionRecord] = Field(default_factory=list)
    priority_special_regions: List[SpecialRegionRecord] = Field(default_factory=list)
    family_nordic: List[CountryRecord] = Field(default_factory=list)
    priority_nordic: List[CountryRecord] = Field(default_factory=list)
    filing_trends: List[Dict[str, Any]] = Field(default_factory=list)
    sources: List[DataSource] = Field(default_factory=list)


class GeographicResponse(LandscapeResponse):
    data: Optional[GeographicData] = None
