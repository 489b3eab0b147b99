"""
Timeline Aggregation
app/pipelines/timeline.py

Flattens the owner x year pivot (Timeline_Current_Owner_Count.csv) into
long-format facts and derives the year totals, top owners, heatmap and
summary statistics from them.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional, Tuple

from app.models.timeline import (
    OwnerTotal,
    TimelineData,
    TimelineHeatmap,
    TimelinePoint,
    TimelineSummary,
    YearTotal,
)
from app.pipelines.utils import (
    MAX_YEAR,
    MIN_YEAR,
    clean_label,
    is_missing_label,
    parse_count,
    parse_year,
    rank_desc,
)

logger = logging.getLogger(__name__)

TOP_OWNERS = 8


def detect_columns(
    keys: List[str], min_year: int = MIN_YEAR, max_year: int = MAX_YEAR
) -> Tuple[str, List[Tuple[str, int]]]:
    """
    Split pivot headers into the owner column and the year columns.

    The owner column is the first non-blank header that is not a year; if
    every header is a year (or blank) the first header is used.

    Returns:
        (owner_key, [(year_key, year), ...] sorted by year)
    """
    owner_key = keys[0] if keys else ""
    for key in keys:
        if key.strip() and parse_year(key, min_year, max_year) is None:
            owner_key = key
            break

    year_columns = []
    for key in keys:
        if key == owner_key:
            continue
        year = parse_year(key, min_year, max_year)
        if year is not None:
            year_columns.append((key, year))

    year_columns.sort(key=lambda kv: kv[1])
    return owner_key, year_columns


def to_long_format(
    records: List[Dict[str, Any]],
    owner_key: str,
    year_columns: List[Tuple[str, int]],
) -> List[TimelinePoint]:
    """
    One (owner, year, count) fact per positive pivot cell.

    Rows whose owner is blank or a placeholder (none/null/unknown) are dropped.
    """
    points: List[TimelinePoint] = []
    skipped = 0

    for row in records:
        owner = clean_label(row.get(owner_key))
        if is_missing_label(owner):
            skipped += 1
            continue

        for key, year in year_columns:
            count = parse_count(row.get(key))
            if count > 0:
                points.append(TimelinePoint(owner=owner, year=year, count=count))

    if skipped:
        logger.info(f"Skipped {skipped} rows with blank or placeholder owner")
    logger.info(f"Long format data points: {len(points)}")
    return points


def compute_year_totals(points: List[TimelinePoint]) -> List[YearTotal]:
    totals: Dict[int, int] = defaultdict(int)
    for p in points:
        totals[p.year] += p.count
    return [YearTotal(year=year, count=totals[year]) for year in sorted(totals)]


def compute_top_owners(points: List[TimelinePoint], limit: int = TOP_OWNERS) -> List[OwnerTotal]:
    """Owners ranked by total filings; ties keep first-appearance order."""
    totals: Dict[str, int] = {}
    for p in points:
        totals[p.owner] = totals.get(p.owner, 0) + p.count
    ranked = rank_desc(list(totals.items()))[:limit]
    return [OwnerTotal(owner=owner, total=total) for owner, total in ranked]


def build_heatmap(points: List[TimelinePoint], owners: List[str]) -> TimelineHeatmap:
    years = sorted({p.year for p in points})
    cells: Dict[Tuple[str, int], int] = defaultdict(int)
    for p in points:
        cells[(p.owner, p.year)] += p.count

    matrix = [[cells.get((owner, year), 0) for year in years] for owner in owners]
    return TimelineHeatmap(owners=owners, years=years, matrix=matrix)


def compute_summary(points: List[TimelinePoint], year_totals: List[YearTotal]) -> TimelineSummary:
    if not points:
        return TimelineSummary()

    peak: Optional[YearTotal] = None
    for yt in year_totals:
        if peak is None or yt.count > peak.count:
            peak = yt

    return TimelineSummary(
        total_filings=sum(p.count for p in points),
        owner_count=len({p.owner for p in points}),
        first_year=year_totals[0].year,
        last_year=year_totals[-1].year,
        peak_year=peak.year if peak else None,
        peak_year_count=peak.count if peak else 0,
    )


def aggregate_timeline(
    records: List[Dict[str, Any]],
    min_year: int = MIN_YEAR,
    max_year: int = MAX_YEAR,
    top_owners: int = TOP_OWNERS,
) -> TimelineData:
    keys = list(records[0].keys()) if records else []
    owner_key, year_columns = detect_columns(keys, min_year, max_year)
    logger.info(f"Extracted columns: owner_key={owner_key!r}, year_count={len(year_columns)}")

    points = to_long_format(records, owner_key, year_columns)
    year_totals = compute_year_totals(points)
    ranked = compute_top_owners(points, top_owners)

    return TimelineData(
        owner_key=owner_key,
        years=[year for _, year in year_columns],
        points=points,
        year_totals=year_totals,
        top_owners=ranked,
        heatmap=build_heatmap(points, [o.owner for o in ranked]),
        summary=compute_summary(points, year_totals),
    )
