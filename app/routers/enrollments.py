from fastapi import APIRouter, Depends

from app.core.deps import get_registry
from app.registry.registry import Registry
from app.schemas.enrollment import EnrollmentCreate, EnrollmentOut
from app.schemas.learner import LearnerWithCourses

router = APIRouter()


@router.post(
    "/{learner_id}/courses",
    response_model=EnrollmentOut,
    responses={
        404: {"description": "Learner or course not found"},
        409: {"description": "Already enrolled"},
    },
)
def enroll(
    learner_id: str,
    payload: EnrollmentCreate,
    registry: Registry = Depends(get_registry),
):
    learner, courses = registry.enroll(learner_id, payload.course_id)
    return {"learner": learner, "courses": courses}


@router.get(
    "/{learner_id}/courses",
    response_model=LearnerWithCourses,
    responses={404: {"description": "Learner not found"}},
)
def learner_courses(learner_id: str, registry: Registry = Depends(get_registry)):
    learner, courses = registry.get_learner_with_courses(learner_id)
    return {"learner": learner, "courses": courses}
