from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.models.search import SpaceStats
from app.modules.stats.service import StatsService
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def get_stats_service(db: Session = Depends(get_db)) -> StatsService:
    return StatsService(db)


@router.get("/spaces", response_model=SpaceStats)
async def get_space_stats(
    stats_service: StatsService = Depends(get_stats_service)
):
    """
    Average space size overall and per property.

    ``overall`` is null when no spaces exist.
    """
    try:
        return await stats_service.space_stats()

    except Exception as e:
        logger.error(f"Failed to compute space stats: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compute space statistics"
        )
