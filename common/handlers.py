from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from common.exceptions import NotFoundError, ValidationError
import logging

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    content = {"detail": exc.message}
    if exc.field is not None:
        content["field"] = exc.field
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


async def not_found_error_handler(request: Request, exc: NotFoundError):
    logger.warning(f"{request.method} {request.url.path} not found: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.message}
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
