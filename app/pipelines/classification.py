"""
Classification Aggregation
app/pipelines/classification.py

IPC / CPC code summaries for the classification dashboard.

Input shapes:
    IPC_Full.csv / CPC_Full.csv
        <classification>, <total>
    Current-Owner_<IPC|CPC>-Full.csv (wide pivot)
        Current Owner, Total, <code: description>, <code: description>, ...
    <IPC|CPC>_Classifications_vs_Year.csv (wide pivot)
        Year, <code: description>, <code: description>, ...
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from app.models.classification import ClassificationData, ClassificationTotal
from app.pipelines.utils import (
    MAX_YEAR,
    MIN_YEAR,
    clean_classification_code,
    clean_label,
    parse_count,
    parse_year,
    rank_desc,
)

logger = logging.getLogger(__name__)

FULL_ROW_LIMIT = 10
TOP_CLASSIFICATIONS = 5
TOP_OWNERS = 15

# Repeated header / separator rows inside owner pivots
_OWNER_NOISE = ("---", "Current Owner")

# Fixed keys of the reduced rows; codes equal to these are skipped
OWNER_ROW_KEYS = ("currentOwner", "total")
YEAR_ROW_KEY = "year"


def summarize_full(records: List[Dict[str, Any]], limit: int = FULL_ROW_LIMIT) -> List[ClassificationTotal]:
    """First `limit` rows of a <classification>, <total> export, blanks and zeros dropped."""
    totals: List[ClassificationTotal] = []
    for row in records[:limit]:
        values = list(row.values())
        classification = clean_classification_code(values[0] if values else "")
        total = parse_count(values[1] if len(values) > 1 else 0)
        if classification and total > 0:
            totals.append(ClassificationTotal(classification=classification, total=total))
    return totals


def _is_owner_row(row: Dict[str, Any]) -> bool:
    values = list(row.values())
    if not values:
        return False
    first = str(values[0])
    return bool(first.strip()) and not any(noise in first for noise in _OWNER_NOISE)


def aggregate_by_owner(
    records: List[Dict[str, Any]],
    top_classifications: int = TOP_CLASSIFICATIONS,
    top_owners: int = TOP_OWNERS,
) -> Tuple[List[Dict[str, Any]], List[str]]:
    """
    Reduce an owner x classification pivot to its strongest rows and columns.

    Columns from the third onward are classification columns. They are
    ranked by their column total and the top `top_classifications` kept
    (zero-total columns never qualify). Owners are ranked by the Total column
    and the top `top_owners` kept.

    Returns:
        (rows like {"currentOwner", "total", <code>: count}, selected codes)
    """
    valid = [row for row in records if _is_owner_row(row)]
    if not valid:
        logger.warning("No valid owner records after filtering")
        return [], []

    keys = list(valid[0].keys())
    owner_key = keys[0]
    total_key = keys[1] if len(keys) > 1 else None

    code_keys = [
        key for key in keys[2:]
        if clean_classification_code(key) and clean_classification_code(key) not in OWNER_ROW_KEYS
    ]
    column_totals = [(key, sum(parse_count(row.get(key)) for row in valid)) for key in code_keys]
    top_keys = [key for key, total in rank_desc(column_totals)[:top_classifications] if total > 0]

    codes: List[str] = []
    for key in top_keys:
        code = clean_classification_code(key)
        if code not in codes:
            codes.append(code)

    logger.info(f"Top {len(codes)} classifications: {', '.join(codes)}")

    rows: List[Dict[str, Any]] = []
    for row in valid:
        owner = clean_label(row.get(owner_key))
        total = parse_count(row.get(total_key)) if total_key else 0
        if not owner or total <= 0:
            continue

        cleaned: Dict[str, Any] = {"currentOwner": owner, "total": total}
        for code in codes:
            cleaned[code] = 0
        for key in top_keys:
            cleaned[clean_classification_code(key)] += parse_count(row.get(key))
        rows.append(cleaned)

    rows.sort(key=lambda r: r["total"], reverse=True)
    return rows[:top_owners], codes


def aggregate_by_year(
    records: List[Dict[str, Any]],
    min_year: int = MIN_YEAR,
    max_year: int = MAX_YEAR,
) -> List[Dict[str, Any]]:
    """
    Year x classification pivot as {"year", <code>: count} rows.

    Rows outside [min_year, max_year] (or with no numeric year) are dropped;
    the rest are sorted by year ascending.
    """
    rows: List[Dict[str, Any]] = []
    skipped_codes = set()
    for row in records:
        keys = list(row.keys())
        if not keys:
            continue

        year = parse_year(row.get(keys[0]), min_year, max_year)
        if year is None:
            continue

        cleaned: Dict[str, Any] = {YEAR_ROW_KEY: year}
        for key in keys[1:]:
            code = clean_classification_code(key)
            if code == YEAR_ROW_KEY:
                skipped_codes.add(key)
            elif code:
                cleaned[code] = cleaned.get(code, 0) + parse_count(row.get(key))
        rows.append(cleaned)

    if skipped_codes:
        logger.warning(f"Skipped columns colliding with the year key: {sorted(skipped_codes)}")
    rows.sort(key=lambda r: r["year"])
    return rows


def aggregate_classification(
    ipc_full_records: List[Dict[str, Any]],
    cpc_full_records: List[Dict[str, Any]],
    ipc_owner_records: List[Dict[str, Any]],
    cpc_owner_records: List[Dict[str, Any]],
    ipc_year_records: List[Dict[str, Any]],
    cpc_year_records: List[Dict[str, Any]],
) -> ClassificationData:
    ipc_by_owner, ipc_columns = aggregate_by_owner(ipc_owner_records)
    cpc_by_owner, cpc_columns = aggregate_by_owner(cpc_owner_records)

    data = ClassificationData(
        ipc_full=summarize_full(ipc_full_records),
        cpc_full=summarize_full(cpc_full_records),
        ipc_by_owner=ipc_by_owner,
        cpc_by_owner=cpc_by_owner,
        ipc_owner_columns=ipc_columns,
        cpc_owner_columns=cpc_columns,
        ipc_by_year=aggregate_by_year(ipc_year_records),
        cpc_by_year=aggregate_by_year(cpc_year_records),
    )

    logger.info(
        f"Summary: IPC Full: {len(data.ipc_full)}, CPC Full: {len(data.cpc_full)}, "
        f"IPC Owner: {len(data.ipc_by_owner)}, CPC Owner: {len(data.cpc_by_owner)}, "
        f"IPC Year: {len(data.ipc_by_year)}, CPC Year: {len(data.cpc_by_year)}"
    )
    return data
