"""Student schemas for EduTrack."""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from backend.app.schemas.attendance import AttendanceRead
from backend.app.schemas.behavior import BehaviorRead
from backend.app.schemas.grade import GradeRead


class StudentRead(BaseModel):
    id: int
    name: str
    class_name: str = Field(validation_alias=AliasChoices("class_name", "class"), serialization_alias="class")
    parent_name: Optional[str] = None
    phone: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class StudentDetail(StudentRead):
    """A student merged with their records, newest first."""

    attendance: List[AttendanceRead] = []
    grades: List[GradeRead] = []
    behavior: List[BehaviorRead] = []
