import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.errors import AlreadyEnrolledError, NotFoundError, RegistryError, ValidationError
from app.schemas.learner import LearnerRead

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AlreadyEnrolledError: status.HTTP_409_CONFLICT,
    ValidationError: status.HTTP_400_BAD_REQUEST,
}


def http_status_for(exc: RegistryError) -> int:
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI) -> None:
    """Render registry errors the way HTTPException renders, plus a machine code."""

    @app.exception_handler(RegistryError)
    async def registry_error_handler(request: Request, exc: RegistryError):
        status_code = http_status_for(exc)
        if status_code >= 500:
            logger.error("%s on %s: %s", exc.code, request.url.path, exc.message)
        else:
            logger.info("%s on %s: %s", exc.code, request.url.path, exc.message)

        content = {"detail": exc.message, "code": exc.code}
        if isinstance(exc, AlreadyEnrolledError):
            content["learner"] = LearnerRead.model_validate(exc.learner).model_dump()

        return JSONResponse(status_code=status_code, content=content)
