"""User schemas used for responses."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class UserRead(BaseModel):
    id: int
    username: str
    role: Literal["teacher", "student"]
    student_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
