# folio/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from folio.api.endpoints import author, auth, contact, health, images, posts, seo
from folio.core.config import Settings, get_settings
from folio.core.exceptions import AuthenticationError, FolioError
from folio.core.logging_config import setup_logging
from folio.db.session import create_db_engine, create_session_factory
from folio.middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger("folio")


async def folio_error_handler(request: Request, exc: FolioError) -> JSONResponse:
    if exc.status_code >= 500:
        # Internal detail stays in the logs.
        logger.error(f"{type(exc).__name__}: {exc.message}", extra={"request_id": getattr(request.state, "request_id", None)})
        return JSONResponse(status_code=exc.status_code, content={"message": "Internal server error"})
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "message": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({"message": "Validation error", "errors": errors}),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        "Database error while handling request",
        exc_info=exc,
        extra={"request_id": getattr(request.state, "request_id", None)},
    )
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application. The engine, session factory and OAuth client are
    created here and attached to app.state; nothing is wired at import time.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    engine = create_db_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Folio API starting up")
        yield
        engine.dispose()
        logger.info("Folio API shut down")

    app = FastAPI(
        title="Folio API",
        description="Public reading site and authoring dashboard for a single-author blog.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.oauth = auth.build_oauth(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Session state for the OpenID Connect redirect round-trip.
    app.add_middleware(SessionMiddleware, secret_key=settings.SECRET_KEY)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(FolioError, folio_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)

    app.include_router(health.router, prefix="/api", tags=["Health Check"])
    app.include_router(auth.router, prefix="/api", tags=["Authentication"])
    app.include_router(posts.router, prefix="/api/posts", tags=["Posts"])
    app.include_router(author.router, prefix="/api/author", tags=["Author"])
    app.include_router(images.router, prefix="/api/images", tags=["Images"])
    app.include_router(contact.router, prefix="/api/contact", tags=["Contact"])
    app.include_router(seo.router, prefix="/api/seo", tags=["SEO & Feeds"])

    @app.get("/metrics", include_in_schema=False)
    async def prometheus_metrics():
        """Endpoint de metricas para Prometheus"""
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
