"""
Geographic Analysis Router
app/routers/geographic.py

Endpoints:
- GET /api/v1/geographic - Family / priority filing geography
"""

from fastapi import APIRouter, Depends, Response

from app.models.geographic import GeographicResponse
from app.routers.responses import set_cache_headers
from app.services.geographic_service import GeographicService, get_geographic_service

router = APIRouter(prefix="/api/v1", tags=["Geographic"])


@router.get(
    "/geographic",
    response_model=GeographicResponse,
    summary="Patent filings by country",
    description="""
    Country-level filing counts for patent families and priority filings.

    - **familyData / priorityData**: `map` (input order, ISO-3 codes for choropleths) and `list` (sorted by total)
    - **familySpecialRegions / prioritySpecialRegions**: EP, WO and PCT filings, kept apart from countries
    - **familyNordic / priorityNordic**: Finland, Sweden, Norway, Denmark and Iceland, zero-filled
    - **filingTrends**: raw rows of Patenting_Trends.csv when present
    """,
)
def get_geographic(
    response: Response,
    service: GeographicService = Depends(get_geographic_service),
):
    data = service.get_geographic_data()
    set_cache_headers(response)
    return GeographicResponse(success=True, data=data)
