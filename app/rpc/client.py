import grpc

from app.core.config import RPC_SERVICE_NAME
from app.rpc.messages import (
    METHODS,
    CreateCourseRequest,
    CreateLearnerRequest,
    DeleteLearnerRequest,
    EnrollRequest,
    GetCourseRequest,
    GetLearnerRequest,
    ListCoursesRequest,
    ListLearnersRequest,
    UpdateLearnerRequest,
    encode,
)


class AcademicClient:
    """Typed calls against academic.AcademicService over an open channel."""

    def __init__(self, channel: grpc.Channel, service_name: str = RPC_SERVICE_NAME):
        self._calls = {
            name: channel.unary_unary(
                f"/{service_name}/{name}",
                request_serializer=encode,
                response_deserializer=response_model.model_validate_json,
            )
            for name, (_request_model, response_model) in METHODS.items()
        }

    def create_learner(self, registration_number, name, department=None):
        return self._calls["CreateLearner"](
            CreateLearnerRequest(registration_number=registration_number, name=name, department=department)
        )

    def get_learner(self, learner_id, include_course_details=False):
        return self._calls["GetLearner"](
            GetLearnerRequest(id=learner_id, include_course_details=include_course_details)
        )

    def list_learners(self, include_course_details=False):
        return self._calls["ListLearners"](
            ListLearnersRequest(include_course_details=include_course_details)
        ).learners

    def update_learner(self, learner_id, registration_number, name, department=None):
        return self._calls["UpdateLearner"](
            UpdateLearnerRequest(
                id=learner_id,
                registration_number=registration_number,
                name=name,
                department=department,
            )
        )

    def delete_learner(self, learner_id):
        self._calls["DeleteLearner"](DeleteLearnerRequest(id=learner_id))

    def create_course(self, code, title, credit_weight):
        return self._calls["CreateCourse"](
            CreateCourseRequest(code=code, title=title, credit_weight=credit_weight)
        )

    def get_course(self, course_id):
        return self._calls["GetCourse"](GetCourseRequest(id=course_id))

    def list_courses(self):
        return self._calls["ListCourses"](ListCoursesRequest()).courses

    def enroll(self, learner_id, course_id):
        return self._calls["Enroll"](EnrollRequest(learner_id=learner_id, course_id=course_id))
