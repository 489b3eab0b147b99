"""
Health Router
app/routers/health.py
"""

from fastapi import APIRouter, Depends

from app.repositories.csv_repository import CsvRepository, get_csv_repository
from app.repositories.datasets import DataDirectory

router = APIRouter(tags=["Health"])


@router.get("/health", summary="Health check")
def health_check(repository: CsvRepository = Depends(get_csv_repository)):
    """Reports whether the data directories are in place."""
    return {
        "status": "healthy",
        "dataDir": str(repository.data_dir),
        "rawDirExists": repository.directory(DataDirectory.raw).is_dir(),
        "processedDirExists": repository.directory(DataDirectory.processed).is_dir(),
    }
