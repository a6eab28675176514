from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_teacher
from backend.app.models.user import User
from backend.app.schemas.common import SuccessResponse
from backend.app.schemas.grade import GradeCreate
from backend.app.services import records

router = APIRouter(prefix="/api/grades", tags=["grades"])


@router.post("", response_model=SuccessResponse)
def create_grade(
    record_in: GradeCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_teacher),
):
    records.add_grade(db, record_in)
    return SuccessResponse()
