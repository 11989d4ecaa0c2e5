from dataclasses import replace

from app.core.errors import ValidationError
from app.models.course import Course
from app.models.learner import Learner
from app.registry.enrollment import EnrollmentManager, resolve
from app.registry.store import EntityStore

# Longest accepted values, shared with the REST schemas
REGISTRATION_NUMBER_MAX_LENGTH = 64
NAME_MAX_LENGTH = 255
DEPARTMENT_MAX_LENGTH = 255
CODE_MAX_LENGTH = 32
TITLE_MAX_LENGTH = 255


def _check_length(field: str, value: str, max_length: int) -> str:
    if len(value) > max_length:
        raise ValidationError(field, f"must be at most {max_length} characters")
    return value


def _required_text(field: str, value, max_length: int) -> str:
    if not isinstance(value, str):
        raise ValidationError(field, "must be a string")
    value = value.strip()
    if not value:
        raise ValidationError(field, "is required")
    return _check_length(field, value, max_length)


def _optional_text(field: str, value, max_length: int) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(field, "must be a string")
    value = value.strip()
    if not value:
        return None
    return _check_length(field, value, max_length)


def _credit_weight(value) -> int:
    # bool is an int subclass, but True credits is never meant
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("credit_weight", "must be an integer")
    if value <= 0:
        raise ValidationError("credit_weight", "must be positive")
    return value


class Registry:
    """The one in-memory registry every adapter talks to.

    Owns a learner store and a course store. Adapters get a handle to an
    instance instead of touching module state, so REST, GraphQL and gRPC
    see the same records.
    """

    def __init__(self):
        self.learners: EntityStore[Learner] = EntityStore("learner")
        self.courses: EntityStore[Course] = EntityStore("course")
        self.enrollments = EnrollmentManager(self.learners, self.courses)

    # Learners

    def create_learner(self, registration_number, name, department=None) -> Learner:
        learner = Learner(
            registration_number=_required_text(
                "registration_number", registration_number, REGISTRATION_NUMBER_MAX_LENGTH
            ),
            name=_required_text("name", name, NAME_MAX_LENGTH),
            department=_optional_text("department", department, DEPARTMENT_MAX_LENGTH),
        )
        return self.learners.create(learner)

    def get_learner(self, learner_id: str) -> Learner:
        return self.learners.get(learner_id)

    def list_learners(self) -> list[Learner]:
        return self.learners.list()

    def update_learner(self, learner_id: str, registration_number, name, department=None) -> Learner:
        """Replace the learner's descriptive fields.

        The id and the enrolled course list are kept; only ``enroll`` adds courses.
        """
        registration_number = _required_text(
            "registration_number", registration_number, REGISTRATION_NUMBER_MAX_LENGTH
        )
        name = _required_text("name", name, NAME_MAX_LENGTH)
        department = _optional_text("department", department, DEPARTMENT_MAX_LENGTH)

        with self.learners.writing() as view:
            current = view.get(learner_id)
            return view.put(
                replace(
                    current,
                    registration_number=registration_number,
                    name=name,
                    department=department,
                )
            )

    def delete_learner(self, learner_id: str) -> None:
        self.learners.delete(learner_id)

    # Courses

    def create_course(self, code, title, credit_weight) -> Course:
        course = Course(
            code=_required_text("code", code, CODE_MAX_LENGTH),
            title=_required_text("title", title, TITLE_MAX_LENGTH),
            credit_weight=_credit_weight(credit_weight),
        )
        return self.courses.create(course)

    def get_course(self, course_id: str) -> Course:
        return self.courses.get(course_id)

    def list_courses(self) -> list[Course]:
        return self.courses.list()

    # Enrollment

    def enroll(self, learner_id: str, course_id: str) -> tuple[Learner, list[Course]]:
        return self.enrollments.enroll(learner_id, course_id)

    def get_learner_with_courses(self, learner_id: str) -> tuple[Learner, list[Course]]:
        return self.enrollments.learner_with_courses(learner_id)

    def resolve_courses(self, course_ids) -> list[Course]:
        """Details for the given course ids; ids that no longer resolve are skipped."""
        with self.courses.reading() as view:
            return resolve(course_ids, view)
