"""
Entity Aggregation
app/pipelines/entity.py

Assignee (organization) and inventor (individual) rankings.

CSV columns (header case varies between exports):
    Assignee_Country_Count_Updated.csv : Country, Assignee, Count
    Inventor_Country.csv               : Inventor, Country[, Count]
    Assignee_Count.csv / Inventor_Count.csv : <name>, <count>
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from app.models.entity import AssigneeRecord, EntityData, InventorRecord
from app.pipelines.utils import clean_label, find_column, get_field, parse_count

logger = logging.getLogger(__name__)

COUNT_COLUMNS = ("count", "total", "patents", "patent count")


def _name_and_count_columns(
    records: List[Dict[str, Any]], name_candidates: Tuple[str, ...]
) -> Tuple[Optional[str], Optional[str]]:
    keys = list(records[0].keys())
    name_key = find_column(keys, name_candidates, fallback_index=0)
    remaining = [k for k in keys if k != name_key and "country" not in k.lower()]
    count_key = find_column(remaining, COUNT_COLUMNS, fallback_index=0)
    return name_key, count_key


def _country_or_none(row: Dict[str, Any]) -> Optional[str]:
    return clean_label(get_field(row, "Country")) or None


def normalize_name_counts(
    records: List[Dict[str, Any]], name_candidates: Tuple[str, ...]
) -> List[Tuple[str, Optional[str], int]]:
    """
    Normalize a <name>, <count> export into (name, country, count) tuples.

    The name column is the first header matching one of name_candidates
    (falling back to the first column); the count column likewise matches
    count/total/patents among the non-country headers (falling back to the
    next such column). Rows with an
    empty name or a non-positive count are dropped; the result is sorted
    by count descending.
    """
    if not records:
        return []

    name_key, count_key = _name_and_count_columns(records, name_candidates)
    rows: List[Tuple[str, Optional[str], int]] = []
    for row in records:
        name = clean_label(row.get(name_key, "")) if name_key else ""
        count = parse_count(row.get(count_key, "")) if count_key else 0
        if name and count > 0:
            rows.append((name, _country_or_none(row), count))

    return sorted(rows, key=lambda r: r[2], reverse=True)


def process_assignee_country(records: List[Dict[str, Any]]) -> List[AssigneeRecord]:
    """Assignee-by-country rows with a positive count, sorted by count desc."""
    assignees: List[AssigneeRecord] = []
    for row in records:
        count = parse_count(get_field(row, "Count", "Total"))
        if count <= 0:
            continue
        assignees.append(
            AssigneeRecord(
                assignee=clean_label(get_field(row, "Assignee")) or "Unknown",
                country=_country_or_none(row),
                count=count,
            )
        )

    assignees.sort(key=lambda a: a.count, reverse=True)
    return assignees


def group_inventors(records: List[Dict[str, Any]]) -> List[InventorRecord]:
    """
    Deduplicate inventors by name and sum their occurrences.

    Each row counts once unless it carries a positive Count value. The first
    non-empty country seen for an inventor is kept.
    """
    grouped: Dict[str, Dict[str, Any]] = {}

    for row in records:
        inventor = clean_label(get_field(row, "Inventor"))
        if not inventor:
            continue

        occurrences = parse_count(get_field(row, "Count")) or 1
        country = _country_or_none(row)

        entry = grouped.get(inventor)
        if entry is None:
            grouped[inventor] = {"country": country, "count": occurrences}
        else:
            entry["count"] += occurrences
            if entry["country"] is None:
                entry["country"] = country

    inventors = [
        InventorRecord(inventor=name, country=entry["country"], count=entry["count"])
        for name, entry in grouped.items()
    ]
    inventors.sort(key=lambda i: i.count, reverse=True)
    logger.info(f"✓ Grouped {len(records)} inventor rows into {len(inventors)} inventors")
    return inventors


def aggregate_entities(
    assignee_count_records: List[Dict[str, Any]],
    assignee_country_records: List[Dict[str, Any]],
    inventor_count_records: List[Dict[str, Any]],
    inventor_country_records: List[Dict[str, Any]],
    assignee_country_processed_records: List[Dict[str, Any]],
) -> EntityData:
    assignee_count = [
        AssigneeRecord(assignee=name, country=country, count=count)
        for name, country, count in normalize_name_counts(
            assignee_count_records, ("assignee", "current owner", "owner", "name")
        )
    ]
    inventor_count = [
        InventorRecord(inventor=name, country=country, count=count)
        for name, country, count in normalize_name_counts(
            inventor_count_records, ("inventor", "name")
        )
    ]

    return EntityData(
        assignee_count=assignee_count,
        inventor_count=inventor_count,
        assignees=process_assignee_country(assignee_country_processed_records),
        inventors=group_inventors(inventor_country_records),
        assignee_country=list(assignee_country_records),
        inventor_country=list(inventor_country_records),
    )
