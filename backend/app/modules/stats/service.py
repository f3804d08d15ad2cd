from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.search import SpaceStats, PropertySpaceStats
from app.db.models import Property as DBProperty, Space as DBSpace
import logging

logger = logging.getLogger(__name__)


class StatsService:
    """Aggregations over stored spaces, recomputed on every call"""

    def __init__(self, db: Session = None):
        self.db = db

    async def space_stats(self) -> SpaceStats:
        """
        Average space size overall and per property.

        With no spaces stored, overall is None and the per-property
        breakdown is empty. Properties without spaces are not listed.
        """
        overall = self.db.query(func.avg(DBSpace.size)).scalar()

        avg_size = func.avg(DBSpace.size).label("avg_size")
        rows = (
            self.db.query(DBSpace.property_id, DBProperty.address, avg_size)
            .join(DBProperty, DBProperty.id == DBSpace.property_id)
            .group_by(DBSpace.property_id, DBProperty.address)
            .order_by(avg_size.desc(), DBSpace.property_id.asc())
            .all()
        )

        logger.debug(f"Space stats: overall={overall}, properties={len(rows)}")

        return SpaceStats(
            overall=float(overall) if overall is not None else None,
            per_property=[
                PropertySpaceStats(
                    property_id=row.property_id,
                    address=row.address,
                    avg_size=float(row.avg_size)
                )
                for row in rows
            ]
        )
