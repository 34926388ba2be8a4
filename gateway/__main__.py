"""
CLI entry point for the gateway server.

Usage:
    python -m gateway --port 7700
"""

import argparse
import logging

from gateway.core.config import settings
from gateway.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="search-gateway HTTP server")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    parser.add_argument("--port", type=int, default=7700, help="Port to listen on")
    args = parser.parse_args()
    configure_logging(level=settings.log_level)

    import uvicorn

    logger.info(
        "Starting %s %s at http://%s:%d",
        settings.project_name,
        settings.version,
        args.host,
        args.port,
    )
    uvicorn.run("gateway.main:app", host=args.host, port=args.port, reload=False)


if __name__ == "__main__":
    main()
