"""Student model for EduTrack."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    # "class" is reserved in Python; the column keeps its natural name.
    class_name = Column("class", String, nullable=False)
    parent_name = Column(String, nullable=True)
    phone = Column(String, nullable=True)

    attendance = relationship("Attendance", back_populates="student", cascade="all, delete-orphan")
    grades = relationship("Grade", back_populates="student", cascade="all, delete-orphan")
    behavior = relationship("Behavior", back_populates="student", cascade="all, delete-orphan")
    user = relationship("User", back_populates="student", uselist=False)
