import strawberry
from starlette.concurrency import run_in_threadpool
from strawberry.types import Info

from app.graphql.errors import registry_errors
from app.graphql.types import CourseInput, CourseType, LearnerInput, LearnerType
from app.registry.registry import Registry

# Registry calls block on the store locks, so every resolver runs them in the
# thread pool, the same way FastAPI runs the sync REST handlers.


def _registry(info: Info) -> Registry:
    return info.context["registry"]


@strawberry.type
class Query:
    @strawberry.field
    async def learner(self, info: Info, id: strawberry.ID) -> LearnerType:
        with registry_errors():
            learner = await run_in_threadpool(_registry(info).get_learner, id)
        return LearnerType.from_model(learner)

    @strawberry.field
    async def learners(self, info: Info) -> list[LearnerType]:
        learners = await run_in_threadpool(_registry(info).list_learners)
        return [LearnerType.from_model(learner) for learner in learners]

    @strawberry.field
    async def course(self, info: Info, id: strawberry.ID) -> CourseType:
        with registry_errors():
            course = await run_in_threadpool(_registry(info).get_course, id)
        return CourseType.from_model(course)

    @strawberry.field
    async def courses(self, info: Info) -> list[CourseType]:
        courses = await run_in_threadpool(_registry(info).list_courses)
        return [CourseType.from_model(c) for c in courses]


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_learner(self, info: Info, input: LearnerInput) -> LearnerType:
        with registry_errors():
            learner = await run_in_threadpool(
                _registry(info).create_learner,
                registration_number=input.registration_number,
                name=input.name,
                department=input.department,
            )
        return LearnerType.from_model(learner)

    @strawberry.mutation
    async def update_learner(self, info: Info, id: strawberry.ID, input: LearnerInput) -> LearnerType:
        with registry_errors():
            learner = await run_in_threadpool(
                _registry(info).update_learner,
                id,
                registration_number=input.registration_number,
                name=input.name,
                department=input.department,
            )
        return LearnerType.from_model(learner)

    @strawberry.mutation
    async def delete_learner(self, info: Info, id: strawberry.ID) -> bool:
        with registry_errors():
            await run_in_threadpool(_registry(info).delete_learner, id)
        return True

    @strawberry.mutation
    async def create_course(self, info: Info, input: CourseInput) -> CourseType:
        with registry_errors():
            course = await run_in_threadpool(
                _registry(info).create_course,
                code=input.code,
                title=input.title,
                credit_weight=input.credit_weight,
            )
        return CourseType.from_model(course)

    @strawberry.mutation
    async def enroll(self, info: Info, learner_id: strawberry.ID, course_id: strawberry.ID) -> LearnerType:
        with registry_errors():
            learner, courses = await run_in_threadpool(_registry(info).enroll, learner_id, course_id)
        # the courses resolved under the enrollment lock, not a later read
        return LearnerType.from_model(learner, courses)


schema = strawberry.Schema(query=Query, mutation=Mutation)
