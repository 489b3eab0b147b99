"""
CSV Dataset Catalog
app/repositories/datasets.py

One entry per logical dataset exported from the patent analytics tool.
Each dataset has a single canonical filename, one directory it lives in,
and the alternate spellings the exports are known to arrive under.

Storage structure:
    data/raw/         - Exports as downloaded
    data/processed/   - Cleaned / re-pivoted exports
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class DataDirectory(str, Enum):
    raw = "raw"
    processed = "processed"


@dataclass(frozen=True)
class CsvDataset:
    """A named CSV export and where to look for it."""

    key: str
    filename: str
    directory: DataDirectory = DataDirectory.raw
    alternates: List[str] = field(default_factory=list)


# ============================================
# Geographic
# ============================================

FAMILY_COUNTRY = CsvDataset(
    key="family_country",
    filename="All_Family_Country_Map.csv",
    alternates=["All-Family-Country-Map.csv", "all_family_country_map.csv"],
)
PRIORITY_COUNTRY = CsvDataset(
    key="priority_country",
    filename="Priority_Country_Map.csv",
    alternates=["Priority-Country-Map.csv", "priority_country_map.csv"],
)
FILING_TRENDS = CsvDataset(
    key="filing_trends",
    filename="Patenting_Trends.csv",
    alternates=["Patenting-Trends.csv", "patenting_trends.csv"],
)

# ============================================
# Entity
# ============================================

ASSIGNEE_COUNT = CsvDataset(
    key="assignee_count",
    filename="Assignee_Count.csv",
    alternates=["Assignee-Count.csv"],
)
ASSIGNEE_COUNTRY = CsvDataset(
    key="assignee_country",
    filename="Assignee_Country.csv",
    alternates=["Assignee-Country.csv"],
)
INVENTOR_COUNT = CsvDataset(
    key="inventor_count",
    filename="Inventor_Count.csv",
    alternates=["Inventor-Count.csv"],
)
INVENTOR_COUNTRY = CsvDataset(
    key="inventor_country",
    filename="Inventor_Country.csv",
    alternates=["Inventor-Country.csv"],
)
ASSIGNEE_COUNTRY_PROCESSED = CsvDataset(
    key="assignee_country_processed",
    filename="Assignee_Country_Count_Updated.csv",
    directory=DataDirectory.processed,
    alternates=["Assignee_Country_Count.csv"],
)

# ============================================
# Classification
# ============================================

IPC_FULL = CsvDataset(
    key="ipc_full",
    filename="IPC_Full.csv",
    alternates=["ipc_full.csv", "IPC_full.csv"],
)
CPC_FULL = CsvDataset(
    key="cpc_full",
    filename="CPC_Full.csv",
    alternates=["cpc_full.csv", "CPC_full.csv"],
)
IPC_BY_OWNER = CsvDataset(
    key="ipc_by_owner",
    filename="Current-Owner_IPC-Full.csv",
    alternates=[
        "current_owner_ipc_full.csv",
        "Current-Owner_IPC_Full.csv",
        "IPC_Assignee.csv",
    ],
)
CPC_BY_OWNER = CsvDataset(
    key="cpc_by_owner",
    filename="Current-Owner_CPC-Full.csv",
    alternates=[
        "current_owner_cpc_full.csv",
        "Current-Owner_CPC_Full.csv",
        "CPC_Assignee.csv",
    ],
)
CPC_BY_YEAR = CsvDataset(
    key="cpc_by_year",
    filename="CPC_Classifications_vs_Year.csv",
    directory=DataDirectory.processed,
    alternates=[
        "application_year_cpc_full.csv",
        "Application-Year_CPC-Full.csv",
        "Application-Year _CPC-Full.csv",
    ],
)
IPC_BY_YEAR = CsvDataset(
    key="ipc_by_year",
    filename="IPC_Classifications_vs_Year.csv",
    directory=DataDirectory.processed,
    alternates=[
        "application_year_ipc_full.csv",
        "Application-Year_IPC-Full.csv",
        "Application-Year _IPC-Full.csv",
    ],
)

# ============================================
# Timeline
# ============================================

TIMELINE_OWNER = CsvDataset(
    key="timeline_owner",
    filename="Timeline_Current_Owner_Count.csv",
    alternates=[
        "timeline_current_owner_count.csv",
        "Timeline-Current-Owner-Count.csv",
    ],
)


DATASETS: Dict[str, CsvDataset] = {
    ds.key: ds
    for ds in (
        FAMILY_COUNTRY,
        PRIORITY_COUNTRY,
        FILING_TRENDS,
        ASSIGNEE_COUNT,
        ASSIGNEE_COUNTRY,
        INVENTOR_COUNT,
        INVENTOR_COUNTRY,
        ASSIGNEE_COUNTRY_PROCESSED,
        IPC_FULL,
        CPC_FULL,
        IPC_BY_OWNER,
        CPC_BY_OWNER,
        CPC_BY_YEAR,
        IPC_BY_YEAR,
        TIMELINE_OWNER,
    )
}
