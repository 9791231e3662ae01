import os
from typing import Any, Dict

import sentry_sdk
from fastapi import Request

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def is_dev() -> bool:
    from formbuilder_core.app.config import settings

    return settings.ENV == "dev"


def get_log_config() -> Dict[str, Any]:
    from formbuilder_core.app.config import settings

    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": settings.LOG_LEVEL,
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
    }
    if settings.LOG_DIR:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        handlers["error_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "ERROR",
            "formatter": "default",
            "filename": os.path.join(settings.LOG_DIR, "error.log"),
            "maxBytes": 10_000_000,
            "backupCount": 5,
        }
        handlers["combined_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "INFO",
            "formatter": "default",
            "filename": os.path.join(settings.LOG_DIR, "combined.log"),
            "maxBytes": 10_000_000,
            "backupCount": 5,
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            "formbuilder_core": {
                "handlers": list(handlers),
                "level": settings.LOG_LEVEL,
                "propagate": False,
            },
        },
        "root": {"handlers": ["console"], "level": settings.LOG_LEVEL},
    }


def client_ip(request: Request) -> str:
    if "x-forwarded-for" in request.headers:
        r = request.headers["x-forwarded-for"].split(", ")[0]
        return r
    if request.client:
        return request.client.host or "127.0.0.1"
    return "127.0.0.1"


def report_exception(exc: BaseException) -> None:
    if not is_dev():
        sentry_sdk.capture_exception(exc)
