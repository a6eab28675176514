"""Student roster and record endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import ensure_can_view_student, get_current_teacher, get_current_user
from backend.app.models.user import User
from backend.app.schemas.student import StudentDetail, StudentRead
from backend.app.services import records

router = APIRouter(prefix="/api/students", tags=["students"])


@router.get("", response_model=list[StudentRead])
def list_students(
    q: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_teacher),
):
    return records.list_students(db, search=q)


@router.get("/{student_id}", response_model=StudentDetail)
def get_student(student_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    ensure_can_view_student(current_user, student_id)
    return records.get_student_detail(db, student_id)
