import logging

import grpc
from pydantic import ValidationError as MessageValidationError

from app.core.config import RPC_SERVICE_NAME
from app.core.errors import AlreadyEnrolledError, NotFoundError, RegistryError, ValidationError
from app.registry.registry import Registry
from app.rpc.messages import (
    METHODS,
    CourseMessage,
    Empty,
    LearnerMessage,
    ListCoursesResponse,
    ListLearnersResponse,
    encode,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    NotFoundError: grpc.StatusCode.NOT_FOUND,
    AlreadyEnrolledError: grpc.StatusCode.ALREADY_EXISTS,
    ValidationError: grpc.StatusCode.INVALID_ARGUMENT,
}

# trailing metadata key that carries the unchanged learner on ALREADY_EXISTS
LEARNER_METADATA_KEY = "learner-bin"


def grpc_status_for(exc: RegistryError) -> grpc.StatusCode:
    for error_type, code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return code
    return grpc.StatusCode.INTERNAL


class AcademicServicer:
    """Implements academic.AcademicService on top of a shared registry."""

    def __init__(self, registry: Registry):
        self.registry = registry

    def _with_details(self, learner, include: bool) -> LearnerMessage:
        courses = self.registry.resolve_courses(learner.course_ids) if include else None
        return LearnerMessage.from_model(learner, courses)

    def CreateLearner(self, request, context):
        learner = self.registry.create_learner(
            registration_number=request.registration_number,
            name=request.name,
            department=request.department,
        )
        return LearnerMessage.from_model(learner)

    def GetLearner(self, request, context):
        if request.include_course_details:
            learner, courses = self.registry.get_learner_with_courses(request.id)
            return LearnerMessage.from_model(learner, courses)
        return LearnerMessage.from_model(self.registry.get_learner(request.id))

    def ListLearners(self, request, context):
        learners = self.registry.list_learners()
        return ListLearnersResponse(
            learners=[self._with_details(learner, request.include_course_details) for learner in learners]
        )

    def UpdateLearner(self, request, context):
        learner = self.registry.update_learner(
            request.id,
            registration_number=request.registration_number,
            name=request.name,
            department=request.department,
        )
        return LearnerMessage.from_model(learner)

    def DeleteLearner(self, request, context):
        self.registry.delete_learner(request.id)
        return Empty()

    def CreateCourse(self, request, context):
        course = self.registry.create_course(
            code=request.code,
            title=request.title,
            credit_weight=request.credit_weight,
        )
        return CourseMessage.from_model(course)

    def GetCourse(self, request, context):
        return CourseMessage.from_model(self.registry.get_course(request.id))

    def ListCourses(self, request, context):
        return ListCoursesResponse(
            courses=[CourseMessage.from_model(c) for c in self.registry.list_courses()]
        )

    def Enroll(self, request, context):
        learner, courses = self.registry.enroll(request.learner_id, request.course_id)
        return LearnerMessage.from_model(learner, courses)

    def _unary(self, name: str):
        request_model, _response_model = METHODS[name]
        method = getattr(self, name)

        def behavior(raw: bytes, context: grpc.ServicerContext):
            try:
                request = request_model.model_validate_json(raw or b"{}")
            except MessageValidationError as exc:
                logger.info("%s rejected: %s", name, exc)
                context.abort(grpc.StatusCode.INVALID_ARGUMENT, f"Malformed {name} request")

            try:
                response = method(request, context)
            except RegistryError as exc:
                code = grpc_status_for(exc)
                logger.info("%s -> %s: %s", name, code.name, exc.message)
                if isinstance(exc, AlreadyEnrolledError):
                    context.set_trailing_metadata(
                        ((LEARNER_METADATA_KEY, encode(LearnerMessage.from_model(exc.learner))),)
                    )
                context.abort(code, exc.message)

            logger.info("%s -> OK", name)
            return response

        return grpc.unary_unary_rpc_method_handler(behavior, response_serializer=encode)

    def handler(self, service_name: str = RPC_SERVICE_NAME) -> grpc.GenericRpcHandler:
        return grpc.method_handlers_generic_handler(
            service_name, {name: self._unary(name) for name in METHODS}
        )
