"""Command-line entry point serving the geometry API with werkzeug."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from werkzeug.serving import make_server

from .app import create_app
from .config import HOST, LOG_LEVEL, PORT


def _setup_logging(level: str) -> None:
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=level.upper(),
            format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        )


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Build and parse CLI arguments."""

    parser = argparse.ArgumentParser(description="Drone navigation geometry service")
    parser.add_argument("--host", default=HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=PORT, help="Port to listen on")
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Root logging level",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point when executing ``python -m dronenav``."""

    args = _parse_args(argv)
    _setup_logging(args.log_level)
    server = make_server(args.host, args.port, create_app(), threaded=True)
    logging.info("Serving geometry API on http://%s:%s", args.host, args.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logging.info("Shutting down geometry API.")
    finally:
        server.server_close()


if __name__ == "__main__":  # pragma: no cover - CLI helper
    main()
