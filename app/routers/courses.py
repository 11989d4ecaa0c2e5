from fastapi import APIRouter, Depends, status

from app.core.deps import get_registry
from app.registry.registry import Registry
from app.schemas.course import CourseCreate, CourseRead

router = APIRouter()


@router.get("", response_model=list[CourseRead])
def list_courses(registry: Registry = Depends(get_registry)):
    return registry.list_courses()


@router.post("", response_model=CourseRead, status_code=status.HTTP_201_CREATED)
def create_course(payload: CourseCreate, registry: Registry = Depends(get_registry)):
    return registry.create_course(
        code=payload.code,
        title=payload.title,
        credit_weight=payload.credit_weight,
    )


@router.get(
    "/{course_id}",
    response_model=CourseRead,
    responses={404: {"description": "Course not found"}},
)
def get_course(course_id: str, registry: Registry = Depends(get_registry)):
    return registry.get_course(course_id)
