from fastapi import APIRouter, Depends, HTTPException, Response, status, Query
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session
from typing import Optional
from app.core.config import settings
from app.core.database import get_db
from app.models.property import CreatePropertyRequest, PropertyView, PropertyCreated
from app.models.search import PropertySearchCriteria, PropertySearchResult
from app.modules.properties.service import PropertyService
from app.modules.properties.validation import PropertyValidationError
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def get_property_service(db: Session = Depends(get_db)) -> PropertyService:
    return PropertyService(db)


@router.get("", response_model=PropertySearchResult)
async def search_properties(
    type: Optional[str] = Query(None, description="Filter by property type"),
    min_price: Optional[float] = Query(None, ge=0, allow_inf_nan=False, description="Minimum price filter"),
    max_price: Optional[float] = Query(None, ge=0, allow_inf_nan=False, description="Maximum price filter"),
    page: int = Query(1, description="Page number, clamped to at least 1"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, description="Page size, clamped to 1-100"),
    sort: Optional[str] = Query(None, description="price_asc or price_desc; anything else sorts by id"),
    property_service: PropertyService = Depends(get_property_service)
):
    """
    Search properties with filtering, sorting and pagination.

    Returns the total number of matches and the requested page,
    each property with its spaces.
    """
    try:
        criteria = PropertySearchCriteria(
            type=type,
            min_price=min_price,
            max_price=max_price,
            page=page,
            limit=limit,
            sort=sort
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    try:
        return await property_service.search_properties(criteria)

    except Exception as e:
        logger.error(f"Failed to search properties: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve properties"
        )


@router.get("/{property_id}", response_model=PropertyView)
async def get_property(
    property_id: int,
    property_service: PropertyService = Depends(get_property_service)
):
    """Get a single property with its spaces"""
    try:
        property_view = await property_service.get_property(property_id)
        if not property_view:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Property not found"
            )
        return property_view

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to get property {property_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve property"
        )


@router.post("", response_model=PropertyCreated, status_code=status.HTTP_201_CREATED)
async def create_property(
    request: CreatePropertyRequest,
    response: Response,
    property_service: PropertyService = Depends(get_property_service)
):
    """
    Create a property together with its spaces.

    The first invalid field is reported as a 400 with an ``error`` message;
    nothing is stored in that case.
    """
    try:
        property_id = await property_service.create_property(request)
        response.headers["Location"] = f"/properties/{property_id}"
        return PropertyCreated(id=property_id)

    except PropertyValidationError:
        raise
    except Exception as e:
        logger.error(f"Failed to create property: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create property"
        )
