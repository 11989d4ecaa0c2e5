from fastapi import APIRouter, Depends, status

from app.core.deps import get_registry
from app.registry.registry import Registry
from app.schemas.learner import LearnerCreate, LearnerRead, LearnerUpdate

router = APIRouter()


@router.post("", response_model=LearnerRead, status_code=status.HTTP_201_CREATED)
def create_learner(payload: LearnerCreate, registry: Registry = Depends(get_registry)):
    return registry.create_learner(
        registration_number=payload.registration_number,
        name=payload.name,
        department=payload.department,
    )


@router.get("", response_model=list[LearnerRead])
def list_learners(registry: Registry = Depends(get_registry)):
    return registry.list_learners()


@router.get(
    "/{learner_id}",
    response_model=LearnerRead,
    responses={404: {"description": "Learner not found"}},
)
def get_learner(learner_id: str, registry: Registry = Depends(get_registry)):
    return registry.get_learner(learner_id)


@router.put(
    "/{learner_id}",
    response_model=LearnerRead,
    responses={404: {"description": "Learner not found"}},
)
def update_learner(
    learner_id: str,
    payload: LearnerUpdate,
    registry: Registry = Depends(get_registry),
):
    # id and enrolled courses survive a full replace
    return registry.update_learner(
        learner_id,
        registration_number=payload.registration_number,
        name=payload.name,
        department=payload.department,
    )


@router.delete(
    "/{learner_id}",
    responses={404: {"description": "Learner not found"}},
)
def delete_learner(learner_id: str, registry: Registry = Depends(get_registry)):
    registry.delete_learner(learner_id)
    return {"message": "Learner deleted"}
