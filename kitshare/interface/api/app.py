"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kitshare.config import Settings
from kitshare.interface.api.routes import auth, comments, health, posts
from kitshare.util.di.container import create_container, setup_di
from kitshare.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    does it in production and conftest.py in tests.

    Args:
        container: DI container to use. Defaults to the production container.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="KitShare API",
        description="Backend API for KitShare - share and discuss the drum kits behind your favourite records",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)

    return app_instance


# App instance for uvicorn
app = create_app()
