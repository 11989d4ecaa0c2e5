from pydantic import BaseModel, Field

from app.schemas.course import CourseRead
from app.schemas.learner import LearnerRead


class EnrollmentCreate(BaseModel):
    course_id: str = Field(min_length=1)


class EnrollmentOut(BaseModel):
    learner: LearnerRead
    courses: list[CourseRead]
