"""
Classification Service
app/services/classification_service.py

Loads the IPC / CPC exports (full lists, owner pivots, year pivots) and
builds the classification summary.
"""

from __future__ import annotations

import logging
from typing import Optional

from app.models.classification import ClassificationData
from app.pipelines.classification import aggregate_classification
from app.repositories.csv_repository import CsvRepository, get_csv_repository
from app.repositories.datasets import (
    CPC_BY_OWNER,
    CPC_BY_YEAR,
    CPC_FULL,
    IPC_BY_OWNER,
    IPC_BY_YEAR,
    IPC_FULL,
)
from app.services.errors import NoLandscapeDataError

logger = logging.getLogger(__name__)

CLASSIFICATION_DATASETS = (IPC_FULL, CPC_FULL, IPC_BY_OWNER, CPC_BY_OWNER, IPC_BY_YEAR, CPC_BY_YEAR)


class ClassificationService:
    """Service for IPC / CPC classification analysis."""

    def __init__(self, repository: Optional[CsvRepository] = None):
        self.repository = repository or get_csv_repository()

    def get_classification_data(self) -> ClassificationData:
        logger.info("=== Classification Data Processing Started ===")

        loaded = {ds.key: self.repository.load_dataset(ds) for ds in CLASSIFICATION_DATASETS}
        records = {key: rows for key, (rows, _) in loaded.items()}

        if not any(records.values()):
            raise NoLandscapeDataError(
                "classification",
                "No classification data found. Expected: "
                + ", ".join(ds.filename for ds in CLASSIFICATION_DATASETS),
            )

        data = aggregate_classification(
            ipc_full_records=records[IPC_FULL.key],
            cpc_full_records=records[CPC_FULL.key],
            ipc_owner_records=records[IPC_BY_OWNER.key],
            cpc_owner_records=records[CPC_BY_OWNER.key],
            ipc_year_records=records[IPC_BY_YEAR.key],
            cpc_year_records=records[CPC_BY_YEAR.key],
        )
        data.sources = [source for _, source in loaded.values()]

        logger.info("=== Classification Data Processing Completed ===")
        return data


# Singleton
_service: Optional[ClassificationService] = None

def get_classification_service() -> ClassificationService:
    global _service
    if _service is None:
        _service = ClassificationService()
    return _service
