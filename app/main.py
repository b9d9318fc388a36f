import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.blog import router as blog_router
from app.api.company import router as company_router
from app.api.inquiries import router as inquiries_router
from app.api.pricing import router as pricing_router
from app.api.projects import router as projects_router
from app.database import Database

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging():
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


def cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def validation_message(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one line, e.g. "title: Field required; order: ..." """
    parts = []
    for error in exc.errors():
        loc = [str(p) for p in error.get("loc", ()) if p != "body"]
        msg = error.get("msg", "Invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request body"


def health_payload() -> dict:
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


def create_app(database_url: str | None = None) -> FastAPI:
    """
    Build the API. The database handle is created on startup and lives on
    `app.state.db` until shutdown; `DATABASE_URL` is used when no url is given.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = Database(database_url)
        db.create_all()
        app.state.db = db
        logger.info("database ready (%s)", db.engine.url.get_backend_name())
        try:
            yield
        finally:
            db.dispose()

    app = FastAPI(title="Studio CMS API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (projects_router, blog_router, pricing_router, inquiries_router, company_router):
        app.include_router(router, prefix="/api")

    @app.get("/health")
    def health_check():
        return health_payload()

    @app.get("/api/health")
    def api_health_check():
        return health_payload()

    # Errors always come back as {"error": "..."}
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request, exc):
        return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc):
        return JSONResponse({"error": validation_message(exc)}, status_code=400)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request, exc):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse({"error": "Internal server error"}, status_code=500)

    return app


configure_logging()
app = create_app()
