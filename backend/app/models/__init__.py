# Pydantic models for API contracts

from .property import (
    PropertyType, SpaceType, SpaceView, PropertyView,
    CreateSpaceRequest, CreatePropertyRequest, PropertyCreated
)
from .search import (
    # Enums
    SortOption,

    # Criteria models
    PropertySearchCriteria, SpaceSearchCriteria,

    # Response models
    PropertySearchResult, SpaceSearchResult, PropertySpaceStats, SpaceStats
)

__all__ = [
    # Property models
    "PropertyType", "SpaceType", "SpaceView", "PropertyView",
    "CreateSpaceRequest", "CreatePropertyRequest", "PropertyCreated",

    # Search enums
    "SortOption",

    # Criteria models
    "PropertySearchCriteria", "SpaceSearchCriteria",

    # Response models
    "PropertySearchResult", "SpaceSearchResult", "PropertySpaceStats", "SpaceStats"
]
