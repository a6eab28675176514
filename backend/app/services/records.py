"""Record-access operations over students and their attendance, grades and behavior."""

import logging
from datetime import date
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.models.attendance import Attendance
from backend.app.models.behavior import Behavior
from backend.app.models.grade import Grade
from backend.app.models.student import Student
from backend.app.schemas.attendance import AttendanceCreate, AttendanceRead
from backend.app.schemas.behavior import BehaviorCreate, BehaviorRead
from backend.app.schemas.grade import GradeCreate, GradeRead
from backend.app.schemas.stats import AttendanceStatusCount, SchoolStats
from backend.app.schemas.student import StudentDetail, StudentRead

logger = logging.getLogger(__name__)


def get_student_or_404(db: Session, student_id: int) -> Student:
    student = db.query(Student).filter(Student.id == student_id).first()
    if not student:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return student


def list_students(db: Session, search: Optional[str] = None) -> list[Student]:
    query = db.query(Student)
    if search:
        term = search.strip().lower()
        # Match the text literally, including % and _.
        term = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        pattern = f"%{term}%"
        query = query.filter(
            or_(
                func.lower(Student.name).like(pattern, escape="\\"),
                func.lower(Student.class_name).like(pattern, escape="\\"),
            )
        )
    return query.order_by(Student.id).all()


def get_student_detail(db: Session, student_id: int) -> StudentDetail:
    student = get_student_or_404(db, student_id)
    attendance = (
        db.query(Attendance)
        .filter(Attendance.student_id == student.id)
        .order_by(Attendance.date.desc(), Attendance.id.desc())
        .all()
    )
    grades = (
        db.query(Grade)
        .filter(Grade.student_id == student.id)
        .order_by(Grade.date.desc(), Grade.id.desc())
        .all()
    )
    behavior = (
        db.query(Behavior)
        .filter(Behavior.student_id == student.id)
        .order_by(Behavior.date.desc(), Behavior.id.desc())
        .all()
    )
    return StudentDetail(
        **StudentRead.model_validate(student).model_dump(),
        attendance=[AttendanceRead.model_validate(a) for a in attendance],
        grades=[GradeRead.model_validate(g) for g in grades],
        behavior=[BehaviorRead.model_validate(b) for b in behavior],
    )


def add_attendance(db: Session, record_in: AttendanceCreate) -> Attendance:
    get_student_or_404(db, record_in.student_id)
    record = Attendance(student_id=record_in.student_id, date=record_in.date, status=record_in.status)
    db.add(record)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Attendance already recorded for this student on this date",
        )
    db.refresh(record)
    logger.info(
        "Recorded attendance student_id=%s date=%s status=%s", record.student_id, record.date, record.status
    )
    return record


def add_grade(db: Session, record_in: GradeCreate) -> Grade:
    get_student_or_404(db, record_in.student_id)
    record = Grade(
        student_id=record_in.student_id,
        subject=record_in.subject,
        score=record_in.score,
        date=record_in.date,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("Recorded grade student_id=%s subject=%s", record.student_id, record.subject)
    return record


def add_behavior(db: Session, record_in: BehaviorCreate) -> Behavior:
    get_student_or_404(db, record_in.student_id)
    record = Behavior(
        student_id=record_in.student_id,
        type=record_in.type,
        description=record_in.description,
        date=record_in.date,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("Recorded %s behavior for student_id=%s", record.type, record.student_id)
    return record


def compute_stats(db: Session, *, today: date) -> SchoolStats:
    total_students = db.query(Student).count()
    rows = (
        db.query(Attendance.status, func.count(Attendance.id))
        .filter(Attendance.date == today)
        .group_by(Attendance.status)
        .order_by(Attendance.status)
        .all()
    )
    # Statuses without rows today are left out rather than zero-filled.
    return SchoolStats(
        totalStudents=total_students,
        attendanceToday=[AttendanceStatusCount(status=s, count=c) for s, c in rows],
    )
