from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from enum import Enum
from app.core.config import settings
from app.models.property import PropertyType, SpaceType, PropertyView, SpaceView


class SortOption(str, Enum):
    DEFAULT = "default"  # id ascending
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"


def _clamp_page(v: int) -> int:
    return max(1, v)


def _clamp_limit(v: int) -> int:
    return min(max(1, v), settings.MAX_PAGE_SIZE)


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


class PaginationMixin(BaseModel):
    """Page/limit pair; out-of-range values are clamped rather than rejected"""
    page: int = 1
    limit: int = settings.DEFAULT_PAGE_SIZE

    @field_validator('page')
    @classmethod
    def clamp_page(cls, v):
        return _clamp_page(v)

    @field_validator('limit')
    @classmethod
    def clamp_limit(cls, v):
        return _clamp_limit(v)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PropertySearchCriteria(PaginationMixin):
    """Filters, sort and pagination for the property search"""
    type: Optional[PropertyType] = None
    min_price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    max_price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    sort: SortOption = SortOption.DEFAULT

    @field_validator('type', mode='before')
    @classmethod
    def blank_type_means_any(cls, v):
        return _blank_to_none(v)

    @field_validator('sort', mode='before')
    @classmethod
    def unknown_sort_means_default(cls, v):
        if v is None:
            return SortOption.DEFAULT
        try:
            return SortOption(v)
        except ValueError:
            return SortOption.DEFAULT


class SpaceSearchCriteria(PaginationMixin):
    """Filters and pagination for the space search (always largest first)"""
    property_id: Optional[int] = None
    type: Optional[SpaceType] = None
    min_size: Optional[float] = Field(None, allow_inf_nan=False)

    @field_validator('type', mode='before')
    @classmethod
    def blank_type_means_any(cls, v):
        return _blank_to_none(v)


class PropertySearchResult(BaseModel):
    total: int
    items: List[PropertyView] = []


class SpaceSearchResult(BaseModel):
    total: int
    items: List[SpaceView] = []


class PropertySpaceStats(BaseModel):
    property_id: int
    address: str
    avg_size: float


class SpaceStats(BaseModel):
    """Average space sizes; overall is None when no spaces are stored"""
    overall: Optional[float] = None
    per_property: List[PropertySpaceStats] = Field(default_factory=list, alias="perProperty")

    class Config:
        populate_by_name = True
