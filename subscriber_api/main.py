# subscriber_api/main.py

import logging
from contextlib import asynccontextmanager
from typing import Dict, Optional, Type

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from subscriber_api.api.subscribers import router as subscribers_router
from subscriber_api.config import Settings
from subscriber_api.db.client import get_client, get_collection
from subscriber_api.db.store import SubscriberStore
from subscriber_api.errors import (
    NotFound,
    StoreFailure,
    SubscriberError,
    ValidationFailure,
)
from subscriber_api.logging_config import setup_logging
from subscriber_api.services.subscribers import SubscriberService

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: Dict[Type[SubscriberError], int] = {
    ValidationFailure: 400,
    NotFound: 404,
    StoreFailure: 500,
}

GENERIC_ERROR_DETAIL = "Internal server error"


def status_for(exc: SubscriberError) -> int:
    for kind, status in ERROR_STATUS_CODES.items():
        if isinstance(exc, kind):
            return status
    return 500


def error_body(exc: SubscriberError, expose_details: bool = True) -> dict:
    body = {"message": exc.message}
    if isinstance(exc, StoreFailure):
        body["error"] = exc.detail if expose_details else GENERIC_ERROR_DETAIL
    return body


def _check_connection(client: MongoClient) -> None:
    try:
        client.admin.command("ping")
        logger.info("Connected to MongoDB")
    except PyMongoError as e:
        # Keep serving; each request reports its own store failure.
        logger.error("Failed to connect to MongoDB: %s", e)


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[SubscriberService] = None,
) -> FastAPI:
    """
    Build the API.

    When ``service`` is omitted, a MongoClient is created from ``settings``
    at startup, shared by every request and closed on shutdown. Passing a
    prebuilt service (tests, embedding) skips all of that.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.subscriber_service is not None:
            yield
            return

        client = get_client(settings)
        _check_connection(client)
        app.state.subscriber_service = SubscriberService(
            SubscriberStore(get_collection(client, settings))
        )
        try:
            yield
        finally:
            app.state.subscriber_service = None
            client.close()

    app = FastAPI(
        title="Subscriber API",
        version="1.0.0",
        description="API documentation for managing subscribers",
        servers=[{"url": settings.server_url}],
        openapi_url="/api-docs.json",
        docs_url="/api-docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.subscriber_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SubscriberError)
    async def subscriber_error_handler(request: Request, exc: SubscriberError):
        return JSONResponse(
            status_code=status_for(exc),
            content=error_body(exc, settings.expose_error_details),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Only the create body is validated by the framework; a malformed or
        # mistyped body is reported the same way as a missing field.
        failure = ValidationFailure()
        return JSONResponse(status_code=status_for(failure), content=error_body(failure))

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(subscribers_router)

    return app
