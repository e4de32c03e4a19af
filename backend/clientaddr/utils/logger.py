from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from flask import Flask, has_request_context, request

from .ip import CLIENT_ADDR_KEY


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with request details when there is a request."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "lineno": record.lineno,
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        if has_request_context():
            log_record["method"] = request.method
            log_record["path"] = request.path
            # Read the cache only; resolving here could log recursively.
            client = request.environ.get(CLIENT_ADDR_KEY)
            log_record["client_ip"] = str(client) if client is not None else None

        return json.dumps(log_record)


def setup_logger(app: Flask) -> None:
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), None)
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())

    app.logger.handlers.clear()
    app.logger.addHandler(handler)
    app.logger.setLevel(level)

    # Library loggers (e.g. the X-Forwarded-For walk) share the handler.
    pkg_logger = logging.getLogger(app.import_name.rsplit(".", 1)[0])
    pkg_logger.handlers = [handler]
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False

    logging.getLogger("werkzeug").handlers = [handler]

    # Under gunicorn, hand everything to its handlers instead.
    gunicorn_logger = logging.getLogger("gunicorn.error")
    if gunicorn_logger.handlers:
        app.logger.handlers = gunicorn_logger.handlers
        app.logger.setLevel(gunicorn_logger.level)
        pkg_logger.handlers = gunicorn_logger.handlers
