from __future__ import annotations

import logging

from task_api.api.app import create_app
from task_api.api.routes import ENDPOINTS
from task_api.config import SETTINGS
from task_api.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def _log_banner() -> None:
    logger.info("Task Manager API server is running on http://%s:%s", SETTINGS.host, SETTINGS.port)
    logger.info("Available endpoints:")
    for method, path, summary in ENDPOINTS:
        logger.info("  %-6s %-25s - %s", method, path, summary)


def main() -> None:
    setup_logging()
    app = create_app()
    _log_banner()
    app.run(host=SETTINGS.host, port=SETTINGS.port)


if __name__ == "__main__":
    main()
