"""Main entry point for the Timestore service."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from timestore.api import create_fastapi_app
from timestore.app import Application
from timestore.config import load_settings
from timestore.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def main():
    """Run the service."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)

    # One store for the process, owned by the Application
    application = Application()
    app = create_fastapi_app(application, wire_format=settings.wire_format)

    logger.info(
        "Starting HTTP server at %s:%s (%s bodies)",
        settings.api_host,
        settings.api_port,
        settings.wire_format,
    )
    # uvicorn exits the process if the port cannot be bound
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
