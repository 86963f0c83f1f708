from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

from .base import AppException

logger = logging.getLogger(__name__)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return consistent error response"""
    logger.error(f"AppException: {exc.code.value} - {exc.message}")
    
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request body validation errors"""
    logger.warning(f"Validation error: {exc}")
    
    return JSONResponse(
        status_code=422,
        content={
            "code": "VALIDATION_ERROR",
            "message": "Validation failed",
            "details": {
                "errors": [
                    {
                        "field": err.get("loc", ["unknown"])[-1],
                        "message": err.get("msg", "Invalid value"),
                        "type": err.get("type", "validation_error")
                    }
                    for err in exc.errors()
                ]
            }
        }
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions (fallback)"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    
    return JSONResponse(
        status_code=500,
        content={
            "code": "INTERNAL_SERVER_ERROR",
            "message": "Something went wrong"
        }
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the application error handlers to a FastAPI app"""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
