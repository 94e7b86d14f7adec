"""Main FastAPI application."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from lenstrace import __version__
from lenstrace.config import config
from lenstrace.logging_config import configure_logging
from lenstrace.routes import analyze

configure_logging(config.LOG_LEVEL, debug=config.DEBUG)


app = FastAPI(
    title="Lenstrace",
    description="Reverse image search footprint analysis for media URLs",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


access_logger = logging.getLogger("lenstrace.access")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests similar to the access log."""

    response = await call_next(request)
    client_host = "-"
    if request.client is not None:
        client_host = request.client.host or "-"

    access_logger.info(
        '%s - "%s %s" %s',
        client_host,
        request.method,
        request.url.path,
        response.status_code,
    )
    return response


# Health check endpoint
@app.get("/healthz")
async def healthz() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


app.include_router(analyze.router)
