"""FastAPI application exposing the chore, badge and flat resources."""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from choreboard.core import alerts
from choreboard.core.config import get_settings
from choreboard.core.logger import get_logger
from choreboard.db.create_tables import create_all
from choreboard.db.session import get_session
from choreboard.repositories import ConstraintViolationError, SQLRepository
from choreboard.repositories.sql_repository import SessionFactory
from choreboard.routers.crud import crud_router, failure_response
from choreboard.routers.entities import ENTITY_RESOURCES

logger = get_logger(__name__)

_DEV_ORIGINS = {
    "http://localhost:8080",
    "http://127.0.0.1:8080",
    "http://localhost:9000",
    "http://127.0.0.1:9000",
}


def _entity_name(request: Request) -> str:
    """Map ``/api/type-of-badges/...`` back to the alert entity name."""
    parts = request.url.path.strip("/").split("/")
    if len(parts) >= 2 and parts[0] == "api":
        names = getattr(request.app.state, "entity_names", {})
        return names.get(parts[1], parts[1])
    return ""


def _field_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append({"field": ".".join(loc), "message": err.get("msg", "")})
    return errors


def create_app(session_factory: SessionFactory = get_session, engine: Engine | None = None) -> FastAPI:
    """Build the application; every repository shares ``session_factory``.

    Pass ``engine`` together with a custom ``session_factory`` so the schema is
    created on the same database the sessions talk to. It defaults to the
    configured ``get_engine()``.
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        if settings.auto_create_schema:
            create_all(engine)
        yield

    app = FastAPI(title="choreboard", lifespan=lifespan)

    allowed_cors = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed_cors.update(_DEV_ORIGINS)
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
            expose_headers=["Location", *alerts.alert_header_names()],
        )

    entity_names = {}
    for resource in ENTITY_RESOURCES:
        repository = SQLRepository(resource.model, session_factory)
        app.include_router(crud_router(resource, repository))
        entity_names[resource.path] = resource.name
    app.state.entity_names = entity_names

    @app.exception_handler(RequestValidationError)
    async def validation_failed(request: Request, exc: RequestValidationError):
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return failure_response(
            _entity_name(request),
            "validation",
            "Request failed validation",
            fieldErrors=_field_errors(exc),
        )

    @app.exception_handler(ConstraintViolationError)
    async def constraint_violated(request: Request, exc: ConstraintViolationError):
        logger.error("Constraint violation on %s %s: %s", request.method, request.url.path, exc)
        return failure_response(
            _entity_name(request),
            "constraintviolation",
            exc.detail,
            status_code=500,
        )

    return app


app = create_app()
