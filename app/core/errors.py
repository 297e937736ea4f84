import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "Internal server error"


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log a failed query and answer 500 without leaking the driver's message."""
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": INTERNAL_ERROR_DETAIL})


def register_error_handlers(app) -> None:
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
