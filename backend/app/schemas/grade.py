from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class GradeCreate(BaseModel):
    student_id: int
    subject: str = Field(min_length=1)
    score: float = Field(ge=0, le=100)
    date: date


class GradeRead(BaseModel):
    id: int
    student_id: int
    subject: str
    score: float
    date: date

    model_config = ConfigDict(from_attributes=True)
