import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pulse.config import Settings, get_settings
from pulse.container import Container
from pulse.infrastructure.database import initialize_database
from pulse.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables on startup; finish deliveries and release the engine on shutdown."""

    container: Container = app.state.container
    initialize_database(container.engine)
    yield
    await container.notification_service.publisher.flush()
    container.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="Pulse", lifespan=lifespan)
    app.state.container = Container.build(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
