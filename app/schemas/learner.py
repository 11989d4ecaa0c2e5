from pydantic import BaseModel, Field

from app.schemas.course import CourseRead


class LearnerCreate(BaseModel):
    registration_number: str = Field(min_length=1)
    name: str = Field(min_length=1)
    department: str | None = None


# PUT replaces the whole record, so it takes the same fields as create
class LearnerUpdate(LearnerCreate):
    pass


class LearnerRead(BaseModel):
    id: str
    registration_number: str
    name: str
    department: str | None = None
    course_ids: list[str] = []

    class Config:
        from_attributes = True


class LearnerWithCourses(BaseModel):
    learner: LearnerRead
    courses: list[CourseRead]
