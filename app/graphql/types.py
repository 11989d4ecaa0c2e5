from typing import Optional

import strawberry
from starlette.concurrency import run_in_threadpool
from strawberry.types import Info

from app.models.course import Course
from app.models.learner import Learner


@strawberry.type(name="Course")
class CourseType:
    id: strawberry.ID
    code: str
    title: str
    credit_weight: int

    @classmethod
    def from_model(cls, course: Course) -> "CourseType":
        return cls(
            id=strawberry.ID(course.id),
            code=course.code,
            title=course.title,
            credit_weight=course.credit_weight,
        )


@strawberry.type(name="Learner")
class LearnerType:
    id: strawberry.ID
    registration_number: str
    name: str
    department: Optional[str]
    course_ids: list[strawberry.ID]
    # set when the courses were already resolved together with the learner
    resolved_courses: strawberry.Private[Optional[list[Course]]] = None

    @strawberry.field(description="Enrolled courses; ids that no longer resolve are left out.")
    async def courses(self, info: Info) -> list[CourseType]:
        resolved = self.resolved_courses
        if resolved is None:
            resolved = await run_in_threadpool(info.context["registry"].resolve_courses, self.course_ids)
        return [CourseType.from_model(c) for c in resolved]

    @classmethod
    def from_model(cls, learner: Learner, courses: Optional[list[Course]] = None) -> "LearnerType":
        return cls(
            id=strawberry.ID(learner.id),
            registration_number=learner.registration_number,
            name=learner.name,
            department=learner.department,
            course_ids=[strawberry.ID(c) for c in learner.course_ids],
            resolved_courses=courses,
        )


@strawberry.input
class LearnerInput:
    registration_number: str
    name: str
    department: Optional[str] = None


@strawberry.input
class CourseInput:
    code: str
    title: str
    credit_weight: int
