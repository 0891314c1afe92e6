#!/usr/bin/env python3
"""
Hello World Server.
Answers GET / with the plain-text greeting "Hello World!".
"""

import logging
import sys
from pathlib import Path

from flask import Flask, Response, jsonify
from werkzeug.exceptions import HTTPException, MethodNotAllowed


try:
    from hello_server.config import (
        ERROR_MESSAGES,
        GREETING,
        GREETING_MIMETYPE,
        LOG_DATE_FORMAT,
        LOG_FORMAT,
        SERVICE_NAME,
        ConfigError,
        load_env_file,
        load_settings,
    )
except ImportError:
    sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
    from hello_server.config import (
        ERROR_MESSAGES,
        GREETING,
        GREETING_MIMETYPE,
        LOG_DATE_FORMAT,
        LOG_FORMAT,
        SERVICE_NAME,
        ConfigError,
        load_env_file,
        load_settings,
    )

logger = logging.getLogger(__name__)

app = Flask(__name__)


@app.errorhandler(404)
def not_found(error):
    return (
        jsonify({"error": "Not found", "message": ERROR_MESSAGES["not_found"]}),
        404,
    )


@app.errorhandler(405)
def method_not_allowed(error: MethodNotAllowed) -> Response:
    response = jsonify(
        {
            "error": "Method not allowed",
            "message": ERROR_MESSAGES["method_not_allowed"],
        }
    )
    response.status_code = 405
    if error.valid_methods:
        response.headers["Allow"] = ", ".join(error.valid_methods)
    return response


@app.errorhandler(500)
def internal_error(error):
    logger.error(f"Internal server error: {error}", exc_info=True)
    return (
        jsonify(
            {
                "error": "Internal server error",
                "message": ERROR_MESSAGES["internal_error"],
            }
        ),
        500,
    )


@app.errorhandler(Exception)
def handle_exception(error):
    if isinstance(error, HTTPException):
        response = jsonify({"error": error.name, "message": error.description})
        response.status_code = error.code
        return response
    logger.error(f"Unhandled exception: {error}", exc_info=True)
    return (
        jsonify(
            {
                "error": "Internal server error",
                "message": ERROR_MESSAGES["internal_error"],
            }
        ),
        500,
    )


@app.route("/", methods=["GET"])
def index() -> Response:
    """Return the greeting as plain text"""
    return Response(GREETING, mimetype=GREETING_MIMETYPE)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with the server's format"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    logger.debug("Logging configured at %s", level)


def main() -> int:
    """Run the Flask server

    Returns:
        Process exit code
    """
    load_env_file()
    try:
        settings = load_settings()
    except ConfigError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        return 2

    configure_logging(settings.log_level)

    logger.info("=" * 60)
    logger.info(SERVICE_NAME)
    logger.info("=" * 60)
    logger.info(f"Server starting on http://{settings.host}:{settings.port}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info("=" * 60)

    app.run(host=settings.host, port=settings.port, debug=settings.debug)
    return 0


if __name__ == "__main__":
    sys.exit(main())
