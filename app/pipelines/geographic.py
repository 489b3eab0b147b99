"""
Geographic Aggregation
app/pipelines/geographic.py

Turns family / priority country exports into choropleth and table data.

CSV columns:
    All Family Country | Total
    Priority Country   | Total
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from app.models.geographic import (
    CountryDataset,
    CountryRecord,
    GeographicData,
    SpecialRegionRecord,
)
from app.pipelines.utils import get_field, parse_count

logger = logging.getLogger(__name__)

FAMILY_COUNTRY_COLUMN = "All Family Country"
PRIORITY_COUNTRY_COLUMN = "Priority Country"
TOTAL_COLUMN = "Total"


class CountryInfo(NamedTuple):
    iso3: str
    name: str


# ISO-2 -> (ISO-3, display name)
COUNTRY_DATA: Dict[str, CountryInfo] = {
    "US": CountryInfo("USA", "United States"),
    "GB": CountryInfo("GBR", "United Kingdom"),
    "FR": CountryInfo("FRA", "France"),
    "DE": CountryInfo("DEU", "Germany"),
    "JP": CountryInfo("JPN", "Japan"),
    "CN": CountryInfo("CHN", "China"),
    "IN": CountryInfo("IND", "India"),
    "CA": CountryInfo("CAN", "Canada"),
    "AU": CountryInfo("AUS", "Australia"),
    "NO": CountryInfo("NOR", "Norway"),
    "SE": CountryInfo("SWE", "Sweden"),
    "CH": CountryInfo("CHE", "Switzerland"),
    "NL": CountryInfo("NLD", "Netherlands"),
    "KR": CountryInfo("KOR", "South Korea"),
    "BR": CountryInfo("BRA", "Brazil"),
    "MX": CountryInfo("MEX", "Mexico"),
    "RU": CountryInfo("RUS", "Russia"),
    "ES": CountryInfo("ESP", "Spain"),
    "IT": CountryInfo("ITA", "Italy"),
    "BE": CountryInfo("BEL", "Belgium"),
    "AT": CountryInfo("AUT", "Austria"),
    "SG": CountryInfo("SGP", "Singapore"),
    "HK": CountryInfo("HKG", "Hong Kong"),
    "TW": CountryInfo("TWN", "Taiwan"),
    "IL": CountryInfo("ISR", "Israel"),
    "IE": CountryInfo("IRL", "Ireland"),
    "DK": CountryInfo("DNK", "Denmark"),
    "FI": CountryInfo("FIN", "Finland"),
    "IS": CountryInfo("ISL", "Iceland"),
    "PL": CountryInfo("POL", "Poland"),
    "TH": CountryInfo("THA", "Thailand"),
    "MY": CountryInfo("MYS", "Malaysia"),
    "PH": CountryInfo("PHL", "Philippines"),
    "ID": CountryInfo("IDN", "Indonesia"),
    "VN": CountryInfo("VNM", "Vietnam"),
    "NZ": CountryInfo("NZL", "New Zealand"),
    "ZA": CountryInfo("ZAF", "South Africa"),
    "TR": CountryInfo("TUR", "Turkey"),
    "GR": CountryInfo("GRC", "Greece"),
    "PT": CountryInfo("PRT", "Portugal"),
    "CZ": CountryInfo("CZE", "Czechia"),
    "HU": CountryInfo("HUN", "Hungary"),
    "RO": CountryInfo("ROU", "Romania"),
    "BG": CountryInfo("BGR", "Bulgaria"),
    "UA": CountryInfo("UKR", "Ukraine"),
    "AE": CountryInfo("ARE", "United Arab Emirates"),
    "SA": CountryInfo("SAU", "Saudi Arabia"),
}

# Patent offices / treaty routes, not countries
SPECIAL_REGIONS: Dict[str, str] = {
    "EP": "European Patent Office",
    "WO": "International (PCT)",
    "PCT": "International (PCT)",
}

# Fixed display order; ties in the Nordic table keep this order
NORDIC_COUNTRIES: List[Tuple[str, str]] = [
    ("FI", "FIN"),
    ("SE", "SWE"),
    ("NO", "NOR"),
    ("DK", "DNK"),
    ("IS", "ISL"),
]


def is_special_region(code: str) -> bool:
    return code.upper() in SPECIAL_REGIONS


def to_country_record(code: str, total: int) -> CountryRecord:
    """Look up display name and ISO-3; unknown codes keep the code as name and a null ISO-3."""
    code = code.upper()
    info = COUNTRY_DATA.get(code)
    if info is None:
        return CountryRecord(country_code=code, country_name=code, iso3=None, total=total)
    return CountryRecord(country_code=code, country_name=info.name, iso3=info.iso3, total=total)


def process_country_data(
    records: List[Dict[str, Any]],
    code_column: str,
    total_column: str = TOTAL_COLUMN,
) -> Tuple[CountryDataset, List[SpecialRegionRecord]]:
    """
    Split country rows into a country dataset and special regions.

    Returns:
        (CountryDataset with map in input order and list sorted by total desc,
         special regions sorted by total desc)
    """
    countries: List[CountryRecord] = []
    special_regions: List[SpecialRegionRecord] = []
    skipped = 0

    for row in records:
        code = get_field(row, code_column).strip().upper()
        if not code:
            skipped += 1
            continue

        total = parse_count(get_field(row, total_column))

        if is_special_region(code):
            special_regions.append(
                SpecialRegionRecord(code=code, name=SPECIAL_REGIONS[code], total=total)
            )
        else:
            countries.append(to_country_record(code, total))

    if skipped:
        logger.warning(f"Skipped {skipped} rows with missing country code")

    dataset = CountryDataset(
        map=countries,
        list=sorted(countries, key=lambda c: c.total, reverse=True),
    )
    special_regions.sort(key=lambda r: r.total, reverse=True)

    logger.info(
        f"✓ Processed {len(countries)} country records and {len(special_regions)} special regions"
    )
    return dataset, special_regions


def build_nordic_subset(dataset: CountryDataset) -> List[CountryRecord]:
    """
    Every Nordic country, present or not.

    Countries missing from the export get a zero total.
    """
    nordic: List[CountryRecord] = []
    for iso2, iso3 in NORDIC_COUNTRIES:
        found: Optional[CountryRecord] = next(
            (c for c in dataset.list if c.country_code == iso2 or c.country_code == iso3 or c.iso3 == iso3),
            None,
        )
        total = found.total if found else 0
        nordic.append(to_country_record(iso2, total))

    return sorted(nordic, key=lambda c: c.total, reverse=True)


def aggregate_geographic(
    family_records: List[Dict[str, Any]],
    priority_records: List[Dict[str, Any]],
    trend_records: Optional[List[Dict[str, Any]]] = None,
) -> GeographicData:
    """Build the geographic summary from family, priority and (optional) trend rows."""
    family_dataset, family_special = process_country_data(family_records, FAMILY_COUNTRY_COLUMN)
    priority_dataset, priority_special = process_country_data(priority_records, PRIORITY_COUNTRY_COLUMN)

    return GeographicData(
        family_data=family_dataset,
        priority_data=priority_dataset,
        family_special_regions=family_special,
        priority_special_regions=priority_special,
        family_nordic=build_nordic_subset(family_dataset),
        priority_nordic=build_nordic_subset(priority_dataset),
        filing_trends=list(trend_records or []),
    )
