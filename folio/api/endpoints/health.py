# folio/api/endpoints/health.py
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from folio.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", summary="Verifica el estado del servicio")
def check_health(db: Session = Depends(get_db)):
    """
    Verifica que la API está activa y que la base de datos responde.
    """
    health_status = {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": {"database": {"status": "unknown"}},
    }

    try:
        db.execute(text("SELECT 1"))
        health_status["services"]["database"] = {"status": "healthy"}
    except SQLAlchemyError:
        logger.exception("Database health check failed")
        raise HTTPException(status_code=503, detail="Database unavailable")

    return health_status
