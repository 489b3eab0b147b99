"""
Classification Analysis Router
app/routers/classification.py

Endpoints:
- GET /api/v1/classification - IPC / CPC code summaries
"""

from fastapi import APIRouter, Depends, Response

from app.models.classification import ClassificationResponse
from app.routers.responses import set_cache_headers
from app.services.classification_service import (
    ClassificationService,
    get_classification_service,
)

router = APIRouter(prefix="/api/v1", tags=["Classification"])


@router.get(
    "/classification",
    response_model=ClassificationResponse,
    summary="IPC / CPC classification summaries",
    description="""
    - **ipcFull / cpcFull**: top 10 codes by total
    - **ipcByOwner / cpcByOwner**: top 15 owners, with columns for the 5 strongest codes (listed in `ipcOwnerColumns` / `cpcOwnerColumns`)
    - **ipcByYear / cpcByYear**: code counts per application year, ascending
    """,
)
def get_classification(
    response: Response,
    service: ClassificationService = Depends(get_classification_service),
):
    data = service.get_classification_data()
    set_cache_headers(response)
    return ClassificationResponse(success=True, data=data)
