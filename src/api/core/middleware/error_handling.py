import logging
import re

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, OperationalError

logger = logging.getLogger(__name__)


def error_content(code: int, detail: str, data=None) -> JSONResponse:
    return JSONResponse(
        status_code=code,
        content={"success": 0, "detail": detail, "data": data},
    )


def register_exception_handlers(app):

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        return error_content(422, "Validation error", data={"errors": exc.errors()})

    @app.exception_handler(IntegrityError)
    async def integrity_exception_handler(request: Request, exc: IntegrityError):
        msg = str(exc.orig) if exc.orig else str(exc)
        if "duplicate key value violates unique constraint" in msg:
            m = re.search(r"Key \((.*?)\)=\((.*?)\)", msg)
            if m:
                field, value = m.groups()
                msg = f"Duplicate entry: {field} = {value}"
            else:
                msg = "Duplicate key violation"
        elif "UNIQUE constraint failed" in msg:
            msg = f"Duplicate entry: {msg.split(':', 1)[-1].strip()}"
        return error_content(409, msg)

    @app.exception_handler(OperationalError)
    async def operational_exception_handler(request: Request, exc: OperationalError):
        logger.error("database unavailable: %s", exc)
        return error_content(503, "Database unavailable, try again later")

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return error_content(500, "Internal Server Error")
