"""
Geographic Service
app/services/geographic_service.py

Loads the family / priority country maps (and the optional patenting
trends export) and builds the geographic summary.
"""

from __future__ import annotations

import logging
from typing import Optional

from app.models.geographic import GeographicData
from app.pipelines.geographic import aggregate_geographic
from app.repositories.csv_repository import CsvRepository, get_csv_repository
from app.repositories.datasets import FAMILY_COUNTRY, FILING_TRENDS, PRIORITY_COUNTRY
from app.services.errors import NoLandscapeDataError

logger = logging.getLogger(__name__)


class GeographicService:
    """Service for family / priority filing geography."""

    def __init__(self, repository: Optional[CsvRepository] = None):
        self.repository = repository or get_csv_repository()

    def get_geographic_data(self) -> GeographicData:
        logger.info("=== Geographic Data Processing Started ===")

        family_records, family_source = self.repository.load_dataset(FAMILY_COUNTRY)
        priority_records, priority_source = self.repository.load_dataset(PRIORITY_COUNTRY)
        trend_records, trend_source = self.repository.load_dataset(FILING_TRENDS)

        if not family_records and not priority_records:
            raise NoLandscapeDataError(
                "geographic",
                f"No geographic data found. Place {FAMILY_COUNTRY.filename} and/or "
                f"{PRIORITY_COUNTRY.filename} in data/{FAMILY_COUNTRY.directory.value}/",
            )

        data = aggregate_geographic(family_records, priority_records, trend_records)
        data.sources = [family_source, priority_source, trend_source]

        logger.info("=== Geographic Data Processing Completed ===")
        return data


# Singleton
_service: Optional[GeographicService] = None

def get_geographic_service() -> GeographicService:
    global _service
    if _service is None:
        _service = GeographicService()
    return _service
