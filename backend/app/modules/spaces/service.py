from sqlalchemy.orm import Session
from app.models.search import SpaceSearchCriteria, SpaceSearchResult
from app.db.models import Space as DBSpace, is_storable_id
from app.modules.properties.service import to_space_view
import logging

logger = logging.getLogger(__name__)


class SpaceService:
    """Service for searching spaces across all properties"""

    def __init__(self, db: Session = None):
        self.db = db

    async def search_spaces(self, criteria: SpaceSearchCriteria) -> SpaceSearchResult:
        """Filtered space search, largest first, paginated"""
        if criteria.property_id is not None and not is_storable_id(criteria.property_id):
            return SpaceSearchResult(total=0, items=[])

        query = self.db.query(DBSpace)

        if criteria.property_id is not None:
            query = query.filter(DBSpace.property_id == criteria.property_id)
        if criteria.type is not None:
            query = query.filter(DBSpace.type == criteria.type.value)
        if criteria.min_size is not None:
            query = query.filter(DBSpace.size >= criteria.min_size)

        total = query.count()

        rows = []
        if criteria.offset < total:
            rows = (
                query
                .order_by(DBSpace.size.desc(), DBSpace.id.asc())
                .offset(criteria.offset)
                .limit(criteria.limit)
                .all()
            )

        logger.debug(
            f"Space search {criteria.model_dump()} matched {total}, returning {len(rows)}"
        )

        return SpaceSearchResult(
            total=total,
            items=[to_space_view(s) for s in rows]
        )
