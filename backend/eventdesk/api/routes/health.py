from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from eventdesk.db.session import get_db
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint"""
    try:
        db.execute(text("SELECT 1"))

        return {
            "status": "healthy",
            "store": "connected",
            "service": "event-registration"
        }
    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        return {
            "status": "unhealthy",
            "store": "unavailable"
        }
