# Standard library imports
import logging

# External package imports
import uvicorn

# Local application imports
from .main import app

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the API server on the configured host and port"""
    settings = app.state.settings
    
    logger.info(f"server running at {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
