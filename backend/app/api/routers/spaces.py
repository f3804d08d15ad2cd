from fastapi import APIRouter, Depends, HTTPException, status, Query
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session
from typing import Optional
from app.core.config import settings
from app.core.database import get_db
from app.models.search import SpaceSearchCriteria, SpaceSearchResult
from app.modules.spaces.service import SpaceService
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def get_space_service(db: Session = Depends(get_db)) -> SpaceService:
    return SpaceService(db)


@router.get("", response_model=SpaceSearchResult)
async def search_spaces(
    property_id: Optional[int] = Query(None, description="Only spaces of this property"),
    type: Optional[str] = Query(None, description="Filter by space type"),
    min_size: Optional[float] = Query(None, allow_inf_nan=False, description="Minimum size in square feet"),
    page: int = Query(1, description="Page number, clamped to at least 1"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, description="Page size, clamped to 1-100"),
    space_service: SpaceService = Depends(get_space_service)
):
    """Search spaces, largest first"""
    try:
        criteria = SpaceSearchCriteria(
            property_id=property_id,
            type=type,
            min_size=min_size,
            page=page,
            limit=limit
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    try:
        return await space_service.search_spaces(criteria)

    except Exception as e:
        logger.error(f"Failed to search spaces: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve spaces"
        )
