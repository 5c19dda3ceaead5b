"""
Main entry point for the Swing Structure Server.

Usage:
    python -m swing_structure.server.main
    python -m swing_structure.server.main --port 8080
"""

import argparse
import logging

import uvicorn

from .api import app

logger = logging.getLogger(__name__)


def run_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Run the API with uvicorn (blocks until shutdown)."""
    logger.info(f"Starting swing structure server on http://{host}:{port}/")
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level="info"
    )


def main():
    parser = argparse.ArgumentParser(
        description="Swing Structure Server - swing points and entry analysis over HTTP"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to run server on (default: 8000)"
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    run_server(args.host, args.port)


if __name__ == "__main__":
    main()
