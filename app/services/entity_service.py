"""
Entity Service
app/services/entity_service.py

Loads assignee and inventor exports and builds the entity rankings.
"""

from __future__ import annotations

import logging
from typing import Optional

from app.models.entity import EntityData
from app.pipelines.entity import aggregate_entities
from app.repositories.csv_repository import CsvRepository, get_csv_repository
from app.repositories.datasets import (
    ASSIGNEE_COUNT,
    ASSIGNEE_COUNTRY,
    ASSIGNEE_COUNTRY_PROCESSED,
    INVENTOR_COUNT,
    INVENTOR_COUNTRY,
)
from app.services.errors import NoLandscapeDataError

logger = logging.getLogger(__name__)

ENTITY_DATASETS = (
    ASSIGNEE_COUNT,
    ASSIGNEE_COUNTRY,
    INVENTOR_COUNT,
    INVENTOR_COUNTRY,
    ASSIGNEE_COUNTRY_PROCESSED,
)


class EntityService:
    """Service for assignee / inventor analysis."""

    def __init__(self, repository: Optional[CsvRepository] = None):
        self.repository = repository or get_csv_repository()

    def get_entity_data(self) -> EntityData:
        loaded = {ds.key: self.repository.load_dataset(ds) for ds in ENTITY_DATASETS}
        records = {key: rows for key, (rows, _) in loaded.items()}

        if not any(records.values()):
            expected = "\n".join(f"- data/{ds.directory.value}/{ds.filename}" for ds in ENTITY_DATASETS)
            raise NoLandscapeDataError(
                "entity",
                f"No entity data files found. Please place CSV files in the data directory:\n{expected}",
            )

        data = aggregate_entities(
            assignee_count_records=records[ASSIGNEE_COUNT.key],
            assignee_country_records=records[ASSIGNEE_COUNTRY.key],
            inventor_count_records=records[INVENTOR_COUNT.key],
            inventor_country_records=records[INVENTOR_COUNTRY.key],
            assignee_country_processed_records=records[ASSIGNEE_COUNTRY_PROCESSED.key],
        )
        data.sources = [source for _, source in loaded.values()]

        logger.info(
            f"✅ Entity data: {len(data.assignees)} assignees, {len(data.inventors)} inventors"
        )
        return data


# Singleton
_service: Optional[EntityService] = None

def get_entity_service() -> EntityService:
    global _service
    if _service is None:
        _service = EntityService()
    return _service
