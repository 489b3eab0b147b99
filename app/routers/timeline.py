"""
Timeline Analysis Router
app/routers/timeline.py

Endpoints:
- GET /api/v1/timeline - Filings per current owner per year
"""

from fastapi import APIRouter, Depends, Response

from app.models.timeline import TimelineResponse
from app.routers.responses import set_cache_headers
from app.services.timeline_service import TimelineService, get_timeline_service

router = APIRouter(prefix="/api/v1", tags=["Timeline"])


@router.get(
    "/timeline",
    response_model=TimelineResponse,
    summary="Filing timeline by current owner",
    description="""
    Long-format (owner, year, count) points flattened from Timeline_Current_Owner_Count.csv,
    plus per-year totals, the top 8 owners, an owner x year heatmap and summary statistics.
    """,
)
def get_timeline(
    response: Response,
    service: TimelineService = Depends(get_timeline_service),
):
    data = service.get_timeline_data()
    set_cache_headers(response)
    return TimelineResponse(success=True, data=data)
