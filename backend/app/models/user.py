from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base

ROLE_TEACHER = "teacher"
ROLE_STUDENT = "student"


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("role IN ('teacher', 'student')", name="ck_users_role"),
        CheckConstraint(
            "(role = 'teacher' AND student_id IS NULL) OR (role = 'student' AND student_id IS NOT NULL)",
            name="ck_users_student_binding",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(80), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String(20), nullable=False)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=True, unique=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    student = relationship("Student", back_populates="user", foreign_keys=[student_id])
    sessions = relationship("UserSession", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User {self.username} ({self.role})>"
