"""
Entity Analysis Router
app/routers/entity.py

Endpoints:
- GET /api/v1/entity - Assignee and inventor rankings
"""

from fastapi import APIRouter, Depends, Response

from app.models.entity import EntityResponse
from app.routers.responses import set_cache_headers
from app.services.entity_service import EntityService, get_entity_service

router = APIRouter(prefix="/api/v1", tags=["Entity"])


@router.get(
    "/entity",
    response_model=EntityResponse,
    summary="Assignee and inventor rankings",
    description="""
    Organizations (assignees) and individuals (inventors) ranked by patent count.

    - **assignees**: from Assignee_Country_Count_Updated.csv, count > 0, sorted desc
    - **inventors**: Inventor_Country.csv grouped by inventor name, sorted desc
    - **assigneeCount / inventorCount**: normalized count exports
    """,
)
def get_entity(
    response: Response,
    service: EntityService = Depends(get_entity_service),
):
    data = service.get_entity_data()
    set_cache_headers(response)
    return EntityResponse(success=True, data=data)
