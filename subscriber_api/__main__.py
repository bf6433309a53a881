# subscriber_api/__main__.py

import logging

import uvicorn

from subscriber_api.config import Settings
from subscriber_api.main import create_app

logger = logging.getLogger(__name__)


def main():
    settings = Settings.from_env()
    app = create_app(settings)

    logger.info("Server running on http://localhost:%s", settings.port)
    logger.info("Swagger docs available on http://localhost:%s/api-docs", settings.port)
    logger.info("Redoc docs available on http://localhost:%s/redoc", settings.port)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
