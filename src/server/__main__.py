"""Run the reference navigation service with ``python -m server``."""

import os

import uvicorn

from navedit.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> None:
    configure_logging()
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8081"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info("Starting navigation service", extra={"host": host, "port": port})
    # uvicorn keeps the root handler installed by configure_logging
    uvicorn.run("server.main:app", host=host, port=port, reload=reload, log_config=None)


if __name__ == "__main__":
    main()
