"""Course Schemas — public representation of the course catalogue."""

from pydantic import BaseModel


class CourseResponse(BaseModel):
    code: str
    name: str
    cfu: int
