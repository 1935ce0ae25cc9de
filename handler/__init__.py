from fastapi import Request, responses, exceptions
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Union
from error import ServerError


def validation_error_handler(
    request: Request, exec: Union[ValidationError, exceptions.RequestValidationError]
) -> responses.JSONResponse:
    """Render a request body that is not a JSON object as a 422
    naming the first offending location"""
    error = exec.errors()[0]
    field = error.get("loc")[-1]
    message = error.get("msg")

    error_msg = f"Invalid {field}: {message}"
    return responses.JSONResponse(
        status_code=422, content={"message": error_msg}
    )


def validation_http_exceptions_handler(
    request: Request, exec: StarletteHTTPException
) -> responses.JSONResponse:
    """Handler for http exceptions, including routing 404/405"""
    return responses.JSONResponse(
        status_code=exec.status_code,
        content={"message": exec.detail},
        headers=getattr(exec, "headers", None),
    )


def server_error_handler(request: Request, exec: ServerError) -> responses.JSONResponse:
    """Server error handler"""
    return responses.JSONResponse(
        status_code=exec.status_code,
        content={"message": str(exec.msg)}
    )
