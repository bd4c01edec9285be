# src/task_tracker/cli/main.py

"""
CLI entrypoint for the development server.

Initializes logging, builds the static-file app and runs it under uvicorn
until Ctrl+C / SIGTERM.
"""

from __future__ import annotations

import logging

import uvicorn

from ..config import get_settings
from ..logging_setup import setup_logging
from ..server.dev_server import create_app, local_ip

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    app = create_app(settings.public_dir, settings.source_dir)

    logger.info("Development server running!")
    logger.info("Access from this computer:      http://localhost:%s", settings.port)
    logger.info("Access from other devices:      http://%s:%s", local_ip(), settings.port)
    logger.info("Serving files from: %s", settings.public_dir.resolve())
    logger.info("Press Ctrl+C to stop the server")

    try:
        # uvicorn installs its own SIGINT/SIGTERM handlers and returns on shutdown.
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    finally:
        logger.info("Shutting down server...")


if __name__ == "__main__":
    main()
