from contextlib import contextmanager

from graphql import GraphQLError

from app.core.errors import AlreadyEnrolledError, RegistryError


@contextmanager
def registry_errors():
    """Re-raise registry errors as GraphQL errors with ``extensions.code`` set."""
    try:
        yield
    except RegistryError as exc:
        extensions = {"code": exc.code}
        if isinstance(exc, AlreadyEnrolledError):
            extensions["learnerId"] = exc.learner.id
            extensions["courseId"] = exc.course_id
        raise GraphQLError(exc.message, original_error=exc, extensions=extensions) from exc
