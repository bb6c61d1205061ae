# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from .api.v1 import user_router, register_error_handlers
from .core.config import Settings, get_settings
from .core.logging_config import configure_logging
from .di.base_container import BaseContainer
from .di.container import DIContainer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Checks the MongoDB connection on startup and closes the client on
    shutdown. An unreachable database is logged but does not stop the
    server; requests touching the store will answer 500 until it is back.
    """
    container: BaseContainer = app.state.container
    mongo_client = container.get("mongo_client") if container.has("mongo_client") else None
    
    if mongo_client is not None:
        try:
            await mongo_client.admin.command("ping")
            logger.info("db connected")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}", exc_info=True)
    
    yield
    
    if mongo_client is not None:
        mongo_client.close()
        logger.info("MongoDB client closed")
    
    logger.info("Application shutdown complete")


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[BaseContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - Dependency container (database, repositories, use cases)
    - API route registration
    
    Args:
        settings: Explicit settings; read from the environment when omitted
        container: Prebuilt container; built from settings when omitted
    
    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        # Load environment variables from .env file
        env_path = Path(__file__).resolve().parent.parent / ".env"
        load_dotenv(env_path)
        settings = get_settings()
    
    configure_logging(settings)
    
    application = FastAPI(
        title="User CRUD API",
        version="1.0.0",
        description="CRUD service for users stored in MongoDB",
        lifespan=lifespan
    )
    
    application.state.settings = settings
    application.state.container = container if container is not None else DIContainer(settings)
    
    application.include_router(user_router)
    register_error_handlers(application)
    
    return application


# Create application instance
app = create_application()
