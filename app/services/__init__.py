"""
Services module for the Patent Landscape API.
"""

from app.services.classification_service import get_classification_service, ClassificationService
from app.services.entity_service import get_entity_service, EntityService
from app.services.errors import NoLandscapeDataError
from app.services.geographic_service import get_geographic_service, GeographicService
from app.services.timeline_service import get_timeline_service, TimelineService

__all__ = [
    # Analysis services
    "get_geographic_service",
    "get_entity_service",
    "get_classification_service",
    "get_timeline_service",
    "GeographicService",
    "EntityService",
    "ClassificationService",
    "TimelineService",

    # Errors
    "NoLandscapeDataError",
]
