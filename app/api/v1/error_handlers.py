# Standard library imports
import logging
from typing import Any, Dict

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.user_dto import ErrorResponse, ValidationErrorResponse
from ...application.validation import CREATE_USER_RULES, run_rules

logger = logging.getLogger(__name__)

CREATE_PATH = "/create"


def _readable_fields(body: Any) -> Dict[str, str]:
    """
    Keep the body entries the validation rules can read as text
    
    Strings and numbers are kept; booleans, objects, arrays and non-object
    bodies are dropped so the rules treat those fields as missing.
    """
    if not isinstance(body, dict):
        return {}
    return {
        key: str(value)
        for key, value in body.items()
        if isinstance(value, (str, int, float)) and not isinstance(value, bool)
    }


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Map request parsing failures onto the service's two error shapes
    
    On /create the rules run over whatever fields are readable and the
    result is answered like any other validation failure (404 with errors).
    Everywhere else the request is answered with the generic 500 body.
    The submitted values are never echoed back.
    """
    error_locations = [".".join(str(part) for part in error.get("loc", ())) for error in exc.errors()]
    logger.info(f"Request validation failed on {request.method} {request.url.path}: {error_locations}")
    
    if request.url.path == CREATE_PATH:
        errors = run_rules(CREATE_USER_RULES, _readable_fields(getattr(exc, "body", None)))
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ValidationErrorResponse(errors=errors).model_dump(mode="json"),
        )
    
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse().model_dump(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on the application"""
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
