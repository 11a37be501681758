"""Exception handlers for applications that expose paginated endpoints."""

import logging
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from .problem_details import (
    ProblemDetailException,
    InvalidCursorError,
    create_problem_response
)

logger = logging.getLogger(__name__)


def _format_errors(errors: list) -> str:
    messages = []
    for error in errors:
        loc = " -> ".join(str(x) for x in error["loc"])
        messages.append(f"{loc}: {error['msg']}")
    return "; ".join(messages)


async def problem_detail_exception_handler(
    request: Request,
    exc: ProblemDetailException
) -> JSONResponse:
    """Handle ProblemDetailException instances, including invalid cursors."""
    if isinstance(exc, InvalidCursorError):
        logger.info(f"Rejected {exc.key} cursor on {request.url.path}")
    else:
        logger.info(
            f"Problem detail exception: {exc.status} - {exc.title}",
            extra={
                "status_code": exc.status,
                "path": str(request.url.path),
                "method": request.method,
                "detail": exc.detail
            }
        )
    return exc.to_response(request)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors, e.g. a non-integer ``limit``."""
    errors = jsonable_encoder(exc.errors())
    logger.info(f"Validation error: {len(errors)} errors")

    return create_problem_response(
        status=422,
        title="Validation Error",
        detail="Validation failed: " + _format_errors(errors),
        request=request,
        validation_errors=errors
    )


async def pydantic_validation_exception_handler(
    request: Request,
    exc: ValidationError
) -> JSONResponse:
    """Handle pydantic errors, e.g. page options carrying both cursors."""
    errors = exc.errors(include_url=False, include_context=False, include_input=False)
    logger.info(
        f"Pydantic validation error: {len(errors)} errors",
        extra={
            "path": str(request.url.path),
            "method": request.method,
        }
    )

    return create_problem_response(
        status=400,
        title="Validation Error",
        detail="Data validation failed: " + _format_errors(errors),
        request=request,
        validation_errors=jsonable_encoder(errors)
    )


def register_exception_handlers(app):
    """Register the pager exception handlers with a FastAPI app."""
    app.add_exception_handler(ProblemDetailException, problem_detail_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, pydantic_validation_exception_handler)
