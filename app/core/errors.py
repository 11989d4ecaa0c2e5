from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.models.learner import Learner


class RegistryError(Exception):
    """Base class for every outcome the registry reports instead of a result."""

    code = "REGISTRY_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(RegistryError):
    code = "NOT_FOUND"

    def __init__(self, kind: str, entity_id: str):
        super().__init__(f"{kind.capitalize()} {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id


class AlreadyEnrolledError(RegistryError):
    code = "ALREADY_ENROLLED"

    def __init__(self, learner: Learner, course_id: str):
        super().__init__(f"Learner {learner.id} is already enrolled in course {course_id}")
        # unchanged learner, so adapters can render it next to the error
        self.learner = learner
        self.course_id = course_id


class ValidationError(RegistryError):
    code = "VALIDATION_ERROR"

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class IdentityExhaustedError(RegistryError):
    code = "IDENTITY_EXHAUSTED"

    def __init__(self, kind: str, attempts: int):
        super().__init__(f"Could not issue a unique {kind} id after {attempts} attempts")
        self.kind = kind
