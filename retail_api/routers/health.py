import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from sqlalchemy.exc import SQLAlchemyError

from retail_api.database.engine import ping

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(request: Request):
    settings = request.app.state.settings
    try:
        database_ok = ping(request.app.state.engine)
    except SQLAlchemyError:
        logger.exception("Database ping failed")
        database_ok = False
    return {
        "status": "ok" if database_ok else "degraded",
        "app": settings.APP_NAME,
        "environment": settings.ENVIRONMENT,
        "database": database_ok,
        "time": datetime.now(timezone.utc).isoformat(),
    }
