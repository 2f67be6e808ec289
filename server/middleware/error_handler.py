# server/middleware/error_handler.py
"""Global error handling middleware"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from schemas.common import ErrorResponse
from utils.exceptions import StaffManagerException, ValidationError
from core.logger import get_logger

logger = get_logger(__name__)


def register_error_handlers(app: FastAPI):
    """Register error handlers with FastAPI app"""

    @app.exception_handler(StaffManagerException)
    async def staff_manager_exception_handler(request: Request, exc: StaffManagerException):
        """Handle domain exceptions raised out of the API routes"""
        if exc.status_code >= 500:
            logger.error(f"{exc.code}: {exc.message}")
        else:
            logger.warning(f"{exc.code}: {exc.message}")

        body = ErrorResponse(
            error=exc.code,
            message=exc.message,
            errors=exc.errors if isinstance(exc, ValidationError) else None,
            path=str(request.url.path)
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=body.model_dump(exclude_none=True)
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions"""
        logger.error(f"Unexpected error: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_SERVER_ERROR",
                "message": "An unexpected error occurred",
                "path": str(request.url.path)
            }
        )
