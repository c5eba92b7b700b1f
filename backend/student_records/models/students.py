# backend/student_records/models/students.py
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from student_records import config

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class StudentCreate(BaseModel):
    """Create payload. Presence of required fields is checked by the router
    so a missing field gets the same message as an empty one."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    roll_number: str | None = Field(None, alias="rollNumber")
    age: int | None = None
    grade: str | None = None
    email: str | None = None
    phone: str | None = None
    course: str | None = None

    @field_validator("age", mode="before")
    @classmethod
    def parse_age(cls, v: Any):
        # "21 years" -> 21, "" -> missing
        if v is None or v == "":
            return None
        if isinstance(v, bool):
            raise ValueError("Age must be a number")
        if isinstance(v, (int, float)):
            # inf / nan
            try:
                return int(v)
            except (OverflowError, ValueError):
                raise ValueError("Age must be a number")
        match = _LEADING_INT.match(str(v))
        if not match:
            raise ValueError("Age must be a number")
        return int(match.group(1))

    def missing_fields(self) -> list[str]:
        values = self.model_dump(by_alias=True)
        return [field for field in config.REQUIRED_FIELDS
                if not values.get(field)]


class StatisticsOut(BaseModel):
    totalStudents: int
    totalCourses: int
    gradeDistribution: dict[str, int]
