"""Behavior notes recorded by teachers."""

from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base


class Behavior(Base):
    __tablename__ = "behavior"
    __table_args__ = (CheckConstraint("type IN ('positive', 'negative')", name="ck_behavior_type"),)

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    type = Column(String(20), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False)

    student = relationship("Student", back_populates="behavior")
