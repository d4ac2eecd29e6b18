# models/student.py
from pydantic import BaseModel, ConfigDict, Field


class StudentBase(BaseModel):
    # Missing fields decode to zero values; no coercion between strings and numbers.
    model_config = ConfigDict(strict=True, populate_by_name=True)

    name: str = ""
    age: int = 0
    class_: str = Field(default="", alias="class")
    subject: str = ""


class StudentCreate(StudentBase):
    """Request body for a new student. Unknown keys, including any
    client-supplied enrollment_number, are dropped."""


class Student(StudentBase):
    enrollment_number: str
    deleted: bool = Field(default=False, exclude=True)


class EnrollmentResponse(BaseModel):
    enrollment_number: str
