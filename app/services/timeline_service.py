"""
Timeline Service
app/services/timeline_service.py

Loads Timeline_Current_Owner_Count.csv and builds the filing timeline.
"""

from __future__ import annotations

import logging
from typing import Optional

from app.models.timeline import TimelineData
from app.pipelines.timeline import aggregate_timeline
from app.repositories.csv_repository import CsvRepository, get_csv_repository
from app.repositories.datasets import TIMELINE_OWNER
from app.services.errors import NoLandscapeDataError

logger = logging.getLogger(__name__)


class TimelineService:
    """Service for current-owner filing timelines."""

    def __init__(self, repository: Optional[CsvRepository] = None):
        self.repository = repository or get_csv_repository()

    def get_timeline_data(self) -> TimelineData:
        records, source = self.repository.load_dataset(TIMELINE_OWNER)

        if not source.found:
            raise NoLandscapeDataError("timeline", f"File not found: {TIMELINE_OWNER.filename}")
        if not records:
            raise NoLandscapeDataError("timeline", f"No data found in {source.filename}")

        data = aggregate_timeline(records)
        data.sources = [source]

        logger.info(
            f"📊 Timeline: {data.summary.total_filings} filings, "
            f"{data.summary.owner_count} owners, peak {data.summary.peak_year}"
        )
        return data


# Singleton
_service: Optional[TimelineService] = None

def get_timeline_service() -> TimelineService:
    global _service
    if _service is None:
        _service = TimelineService()
    return _service
