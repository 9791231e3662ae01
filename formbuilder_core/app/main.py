import logging
import logging.config
import time
from typing import Any, Callable, MutableMapping, Optional

from formbuilder_core.app.common import client_ip, get_log_config, is_dev, report_exception

logging.config.dictConfig(get_log_config())
logger = logging.getLogger(__name__)

import fastapi
import starlette
import uvicorn
from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request

from formbuilder_core.app import schemas
from formbuilder_core.app.api import health
from formbuilder_core.app.api.api_v1.api import api_router
from formbuilder_core.app.config import settings
from formbuilder_core.db.init_db import init_db
from formbuilder_core.db.session import SessionLocal
from formbuilder_core.utils.base import FormServiceError

args: MutableMapping[str, Optional[Any]] = {}
if is_dev():
    args["openapi_url"] = f"{settings.API_STR}/openapi.json"
else:
    args["openapi_url"] = None
    args["redoc_url"] = None

app = FastAPI(title=settings.PROJECT_NAME, **args)  # type: ignore


def error_body(error: str, message: Optional[str] = None) -> dict:
    return schemas.ErrorResponse(error=error, message=message).model_dump(
        exclude_none=True
    )


@app.middleware("http")
async def log_requests(request: Request, call_next: Callable) -> Any:
    logger.info(
        f"{request.method} {request.url.path} from {client_ip(request)} "
        f"user-agent={request.headers.get('user-agent', '-')!r}"
    )
    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"in {duration:.3f}s"
    )
    return response


@app.exception_handler(FormServiceError)
async def form_service_exception_handler(
    request: Request, exc: FormServiceError
) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc}",
            exc_info=exc,
        )
        report_exception(exc)
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(
        status_code=exc.status_code, content=error_body(exc.error, exc.message)
    )


@app.exception_handler(RequestValidationError)
async def custom_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    logger.info(f"Validation error: {request.method} {request.url} {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request", message),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Unknown paths and unsupported methods both count as unmatched routes
    if exc.status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ) and exc.detail in ("Not Found", "Method Not Allowed"):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error_body("Route not found"),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error: {request.method} {request.url.path}", exc_info=exc
    )
    report_exception(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def set_backend_cors_origins() -> None:
    origins = settings.cors_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info("Set CORS allowed origins: " + str(origins))


set_backend_cors_origins()

app.include_router(health.router, prefix=settings.API_STR, tags=["health"])
app.include_router(api_router, prefix=settings.API_STR)


def print_app_settings() -> None:
    logger.info("settings:")
    for k, v in settings.model_dump(exclude={"DATABASE_URL", "SENTRY_DSN"}).items():
        logger.info(f"{k}: {v}")


print_app_settings()
for lib in [fastapi, uvicorn, starlette]:
    logger.info("{} version: {}".format(lib.__name__, lib.__version__))


@app.on_event("startup")
def create_tables() -> None:
    if not settings.CREATE_TABLES_ON_STARTUP:
        return
    db = SessionLocal()
    try:
        init_db(db)
        logger.info("Database initialized")
    finally:
        db.close()


@app.on_event("shutdown")
def shutdown_event() -> None:
    logger.info("Server shutting down")


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
