"""Teacher dashboard statistics."""

from typing import List

from pydantic import BaseModel


class AttendanceStatusCount(BaseModel):
    status: str
    count: int


class SchoolStats(BaseModel):
    totalStudents: int
    attendanceToday: List[AttendanceStatusCount]
