"""Linking learners to courses.

Any operation that needs both stores takes the learner lock first and the
course lock second (``LOCK_ORDER``). Taking them the other way round from
another thread could deadlock against ``enroll``.
"""
from dataclasses import replace

from app.core.errors import AlreadyEnrolledError
from app.models.course import Course
from app.models.learner import Learner
from app.registry.store import EntityStore, ReadView

LOCK_ORDER = ("learner", "course")


def resolve(course_ids, courses: ReadView[Course]) -> list[Course]:
    """Course details for ``course_ids``, skipping ids that no longer exist."""
    resolved = []
    for course_id in course_ids:
        course = courses.find(course_id)
        if course is not None:
            resolved.append(course)
    return resolved


class EnrollmentManager:
    def __init__(self, learners: EntityStore[Learner], courses: EntityStore[Course]):
        self.learners = learners
        self.courses = courses

    def enroll(self, learner_id: str, course_id: str) -> tuple[Learner, list[Course]]:
        with self.learners.writing() as learner_view, self.courses.reading() as course_view:
            learner = learner_view.get(learner_id)
            course_view.get(course_id)

            if learner.is_enrolled(course_id):
                raise AlreadyEnrolledError(learner, course_id)

            learner = learner_view.put(
                replace(learner, course_ids=learner.course_ids + (course_id,))
            )
            return learner, resolve(learner.course_ids, course_view)

    def learner_with_courses(self, learner_id: str) -> tuple[Learner, list[Course]]:
        with self.learners.reading() as learner_view, self.courses.reading() as course_view:
            learner = learner_view.get(learner_id)
            return learner, resolve(learner.course_ids, course_view)
