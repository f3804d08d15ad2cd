from typing import Optional
from sqlalchemy.orm import Session, selectinload
from app.models.property import CreatePropertyRequest, PropertyView, SpaceView
from app.models.search import PropertySearchCriteria, PropertySearchResult, SortOption
from app.db.models import Property as DBProperty, Space as DBSpace, is_storable_id
from app.modules.properties.validation import (
    PropertyValidationError, validate_property_request,
    parse_property_type, parse_space_type, normalize_text
)
import logging

logger = logging.getLogger(__name__)


def to_space_view(db_space: DBSpace) -> SpaceView:
    return SpaceView(
        id=db_space.id,
        property_id=db_space.property_id,
        type=db_space.type,
        size=db_space.size,
        description=db_space.description
    )


def to_property_view(db_property: DBProperty) -> PropertyView:
    return PropertyView(
        id=db_property.id,
        address=db_property.address,
        type=db_property.type,
        price=db_property.price,
        description=db_property.description,
        spaces=[to_space_view(s) for s in db_property.spaces]
    )


class PropertyService:
    """Service for property search, lookup and creation"""

    def __init__(self, db: Session = None):
        self.db = db

    def _build_search_query(self, criteria: PropertySearchCriteria):
        """Apply filters and ordering; pagination is left to the caller"""
        query = self.db.query(DBProperty)

        if criteria.type is not None:
            query = query.filter(DBProperty.type == criteria.type.value)
        if criteria.min_price is not None:
            query = query.filter(DBProperty.price >= criteria.min_price)
        if criteria.max_price is not None:
            query = query.filter(DBProperty.price <= criteria.max_price)

        if criteria.sort == SortOption.PRICE_ASC:
            query = query.order_by(DBProperty.price.asc(), DBProperty.id.asc())
        elif criteria.sort == SortOption.PRICE_DESC:
            query = query.order_by(DBProperty.price.desc(), DBProperty.id.asc())
        else:
            query = query.order_by(DBProperty.id.asc())

        return query

    async def search_properties(self, criteria: PropertySearchCriteria) -> PropertySearchResult:
        """Filtered, sorted and paginated property search with spaces attached"""
        query = self._build_search_query(criteria)

        total = query.order_by(None).count()

        rows = []
        # Pages past the end never reach the database
        if criteria.offset < total:
            rows = (
                query
                .options(selectinload(DBProperty.spaces))
                .offset(criteria.offset)
                .limit(criteria.limit)
                .all()
            )

        logger.debug(
            f"Property search {criteria.model_dump()} matched {total}, returning {len(rows)}"
        )

        return PropertySearchResult(
            total=total,
            items=[to_property_view(p) for p in rows]
        )

    async def get_property(self, property_id: int) -> Optional[PropertyView]:
        """Get property by ID with its spaces"""
        if not is_storable_id(property_id):
            return None

        db_property = (
            self.db.query(DBProperty)
            .options(selectinload(DBProperty.spaces))
            .filter(DBProperty.id == property_id)
            .first()
        )

        if not db_property:
            return None

        return to_property_view(db_property)

    async def create_property(self, request: CreatePropertyRequest) -> int:
        """Validate and insert a property together with its spaces in one transaction"""
        try:
            validate_property_request(request)

            db_property = DBProperty(
                address=request.address.strip(),
                type=parse_property_type(request.type).value,
                price=request.price,
                description=normalize_text(request.description)
            )

            for space in request.spaces or []:
                db_property.spaces.append(DBSpace(
                    type=parse_space_type(space.type).value,
                    size=space.size,
                    description=normalize_text(space.description)
                ))

            self.db.add(db_property)
            self.db.commit()
            self.db.refresh(db_property)

            logger.info(
                f"Created property {db_property.id} with {len(db_property.spaces)} spaces"
            )
            return db_property.id

        except PropertyValidationError as e:
            self.db.rollback()
            logger.warning(f"Rejected property create request: {e}")
            raise
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create property: {e}")
            raise
