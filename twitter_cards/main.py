from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from twitter_cards.core.config import settings
from twitter_cards.exceptions.handlers import register_exception_handlers
from twitter_cards.routers import router


def create_app() -> FastAPI:
    """Build the FastAPI application"""
    app = FastAPI(
        title="Twitter Card Parser",
        description="Extracts Twitter Card metadata from HTML documents",
        version="1.0.0"
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Include the centralized router
    app.include_router(router, prefix="/api")
    return app


app = create_app()
