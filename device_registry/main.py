# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.health_controller import router as health_router
from .api.v1 import device_router
from .api.v1.errors import request_validation_exception_handler
from .core.config import get_settings, DEVICE_STORE_MONGO
from .infrastructure.db.mongo_connection import close_connection, ensure_device_indexes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates the device collection indexes when MongoDB backs the device store
    and closes the MongoDB client on shutdown.
    """
    settings = get_settings()
    uses_mongo = settings.device_store == DEVICE_STORE_MONGO

    if uses_mongo:
        try:
            await ensure_device_indexes()
        except Exception as e:
            # Don't fail app startup if MongoDB is unavailable; /ready reports it
            logger.error(f"Failed to ensure device indexes: {e}", exc_info=True)

    logger.info(f"Device registry started with '{settings.device_store}' device store")

    yield

    if uses_mongo:
        close_connection()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Request validation error mapping
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # Create FastAPI app
    application = FastAPI(
        title="Device Registry API",
        version="1.0.0",
        description="Registry of physical devices with state-gated updates",
        lifespan=lifespan
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    # Register API routers
    application.include_router(health_router)
    application.include_router(device_router, prefix="/api/v1/devices")

    return application


# Create application instance
app = create_application()
