from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

BehaviorType = Literal["positive", "negative"]


class BehaviorCreate(BaseModel):
    student_id: int
    type: BehaviorType
    description: Optional[str] = None
    date: date


class BehaviorRead(BaseModel):
    id: int
    student_id: int
    type: BehaviorType
    description: Optional[str] = None
    date: date

    model_config = ConfigDict(from_attributes=True)
