from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_teacher
from backend.app.models.user import User
from backend.app.schemas.attendance import AttendanceCreate
from backend.app.schemas.common import SuccessResponse
from backend.app.services import records

router = APIRouter(prefix="/api/attendance", tags=["attendance"])


@router.post("", response_model=SuccessResponse)
def create_attendance(
    record_in: AttendanceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_teacher),
):
    records.add_attendance(db, record_in)
    return SuccessResponse()
