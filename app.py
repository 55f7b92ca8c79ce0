"""Greeter Flask application entry point."""

import logging
import os
import sys

from flask import Flask

GREETING = "Hello, world!"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

logger = logging.getLogger(__name__)

app = Flask(__name__)


@app.route("/", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
def index() -> tuple[str, int, dict[str, str]]:
    """Return the fixed greeting."""
    return GREETING, 200, {"Content-Type": "text/plain; charset=utf-8"}


def get_port(value: str | None = None) -> int:
    """Resolve the listen port from ``value`` or the ``PORT`` environment variable."""
    if value is None:
        value = os.environ.get("PORT")
    if value is None or value == "":
        return DEFAULT_PORT
    port = int(value)
    if not 0 < port < 65536:
        raise ValueError(f"port out of range: {port}")
    return port


def run(port: int | None = None, host: str | None = None) -> None:
    """Bind the listener and serve until the process is terminated."""
    if port is None:
        port = get_port()
    if host is None:
        host = os.environ.get("HOST", DEFAULT_HOST)
    logger.info("Starting greeter on %s:%d", host, port)
    app.run(host=host, port=port)


def main() -> None:
    """Configure logging and serve until the process exits."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    try:
        run()
    except ValueError as exc:
        logger.error("Invalid PORT setting: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
