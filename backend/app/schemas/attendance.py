from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict

AttendanceStatus = Literal["present", "absent", "late", "sick"]


class AttendanceCreate(BaseModel):
    student_id: int
    date: date
    status: AttendanceStatus


class AttendanceRead(BaseModel):
    id: int
    student_id: int
    date: date
    status: AttendanceStatus

    model_config = ConfigDict(from_attributes=True)
