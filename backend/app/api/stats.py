"""Teacher dashboard statistics endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.core.time import utc_today
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_teacher
from backend.app.models.user import User
from backend.app.schemas.stats import SchoolStats
from backend.app.services import records

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=SchoolStats)
def get_stats(db: Session = Depends(get_db), current_user: User = Depends(get_current_teacher)):
    return records.compute_stats(db, today=utc_today())
