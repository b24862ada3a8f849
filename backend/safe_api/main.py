from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from safe_api.api.v1.router import router as safes_router
from safe_api.core.config import get_settings
from safe_api.core.logging import configure_logging
from safe_api.domain.errors import SafeError

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="Stores opaque client-encrypted blobs. The server never decrypts them.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["content-type", "authorization"],
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


@app.exception_handler(SafeError)
async def handle_safe_error(request: Request, exc: SafeError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "timestamp": int(time.time())},
    )


app.include_router(safes_router)


@app.get("/", tags=["health"], response_class=PlainTextResponse)
def root() -> str:
    return "Safe API ready to serve data!"


@app.get("/health", tags=["health"], response_class=PlainTextResponse)
def health() -> str:
    return "OK"
