"""Request and response messages of the academic gRPC service.

Messages travel as JSON-encoded pydantic models, so the service needs no
generated stubs. ``METHODS`` is the wire contract shared by the server and
``AcademicClient``.
"""
from typing import Optional

from pydantic import BaseModel, Field

from app.models.course import Course
from app.models.learner import Learner


def encode(message: BaseModel) -> bytes:
    return message.model_dump_json().encode("utf-8")


class Empty(BaseModel):
    pass


class CourseMessage(BaseModel):
    id: str
    code: str
    title: str
    credit_weight: int

    @classmethod
    def from_model(cls, course: Course) -> "CourseMessage":
        return cls(
            id=course.id,
            code=course.code,
            title=course.title,
            credit_weight=course.credit_weight,
        )


class LearnerMessage(BaseModel):
    id: str
    registration_number: str
    name: str
    department: Optional[str] = None
    course_ids: list[str] = []
    # only filled when the caller asked for course details
    course_details: Optional[list[CourseMessage]] = None

    @classmethod
    def from_model(cls, learner: Learner, courses: list[Course] | None = None) -> "LearnerMessage":
        return cls(
            id=learner.id,
            registration_number=learner.registration_number,
            name=learner.name,
            department=learner.department,
            course_ids=list(learner.course_ids),
            course_details=None if courses is None else [CourseMessage.from_model(c) for c in courses],
        )


class CreateLearnerRequest(BaseModel):
    registration_number: str
    name: str
    department: Optional[str] = None


class GetLearnerRequest(BaseModel):
    id: str
    include_course_details: bool = False


class ListLearnersRequest(BaseModel):
    include_course_details: bool = False


class ListLearnersResponse(BaseModel):
    learners: list[LearnerMessage]


class UpdateLearnerRequest(BaseModel):
    id: str
    registration_number: str
    name: str
    department: Optional[str] = None


class DeleteLearnerRequest(BaseModel):
    id: str


class CreateCourseRequest(BaseModel):
    code: str
    title: str
    credit_weight: int = Field(strict=True)


class GetCourseRequest(BaseModel):
    id: str


class ListCoursesRequest(BaseModel):
    pass


class ListCoursesResponse(BaseModel):
    courses: list[CourseMessage]


class EnrollRequest(BaseModel):
    learner_id: str
    course_id: str


# rpc name -> (request, response)
METHODS = {
    "CreateLearner": (CreateLearnerRequest, LearnerMessage),
    "GetLearner": (GetLearnerRequest, LearnerMessage),
    "ListLearners": (ListLearnersRequest, ListLearnersResponse),
    "UpdateLearner": (UpdateLearnerRequest, LearnerMessage),
    "DeleteLearner": (DeleteLearnerRequest, Empty),
    "CreateCourse": (CreateCourseRequest, CourseMessage),
    "GetCourse": (GetCourseRequest, CourseMessage),
    "ListCourses": (ListCoursesRequest, ListCoursesResponse),
    "Enroll": (EnrollRequest, LearnerMessage),
}
