import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s | %(levelname)-8s | %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)

# IMPORT ROUTERS
from app.routers.classification import router as classification_router
from app.routers.entity import router as entity_router
from app.routers.geographic import router as geographic_router
from app.routers.health import router as health_router
from app.routers.responses import no_data_exception_handler, unhandled_exception_handler
from app.routers.timeline import router as timeline_router
from app.services.errors import NoLandscapeDataError

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title="Patent Landscape API",
    description="""
# Patent Landscape Analytics API

Read-only JSON API over patent-landscape CSV exports (geography, entities,
classification codes, filing timeline), shaped for tables, bar charts,
choropleth maps and heatmaps.

---

## Endpoints

| Domain | Endpoint | Method | Source files |
|--------|----------|--------|--------------|
| Geographic | `/api/v1/geographic` | GET | All_Family_Country_Map.csv, Priority_Country_Map.csv, Patenting_Trends.csv |
| Entity | `/api/v1/entity` | GET | Assignee_Count.csv, Assignee_Country.csv, Inventor_Count.csv, Inventor_Country.csv, Assignee_Country_Count_Updated.csv |
| Classification | `/api/v1/classification` | GET | IPC_Full.csv, CPC_Full.csv, Current-Owner_IPC-Full.csv, Current-Owner_CPC-Full.csv, IPC/CPC_Classifications_vs_Year.csv |
| Timeline | `/api/v1/timeline` | GET | Timeline_Current_Owner_Count.csv |

Every response is `{success, data?, error?}`. A domain answers HTTP 500 only
when none of its input files could be loaded; missing or unparseable
individual files leave that section empty.

### Data Storage

| Directory | Contents |
|-----------|----------|
| `data/raw/` | Exports as downloaded |
| `data/processed/` | Cleaned / re-pivoted exports |

Set `PATENT_DATA_DIR` to point somewhere else.

---
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(NoLandscapeDataError, no_data_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    """Root endpoint that returns API information."""
    return {
        "message": "Welcome to the Patent Landscape API",
        "version": "1.0.0",
        "documentation": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "endpoints": [
            {"method": "GET", "endpoint": "/api/v1/geographic", "description": "Filings by country"},
            {"method": "GET", "endpoint": "/api/v1/entity", "description": "Assignee and inventor rankings"},
            {"method": "GET", "endpoint": "/api/v1/classification", "description": "IPC / CPC summaries"},
            {"method": "GET", "endpoint": "/api/v1/timeline", "description": "Filings per owner per year"},
        ],
    }


# REGISTER ROUTERS (order matters for docs display)
app.include_router(geographic_router)       # Geographic analysis
app.include_router(entity_router)           # Entity analysis
app.include_router(classification_router)   # Classification analysis
app.include_router(timeline_router)         # Timeline analysis
app.include_router(health_router)           # Health check


# STARTUP & SHUTDOWN EVENTS
@app.on_event("startup")
async def startup_event():
    """Runs when the application starts."""
    logger.info("=" * 60)
    logger.info("  Patent Landscape API")
    logger.info("=" * 60)
    logger.info(f"📁 Data directory: {os.getenv('PATENT_DATA_DIR', 'data')}")
    logger.info("📚 Documentation: /docs (Swagger UI), /redoc (ReDoc)")
    logger.info("📋 GET /api/v1/geographic | /api/v1/entity | /api/v1/classification | /api/v1/timeline")


@app.on_event("shutdown")
async def shutdown_event():
    """Runs when the application shuts down."""
    logger.info("Shutting down Patent Landscape API...")


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
