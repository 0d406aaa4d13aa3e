from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from doctor_portal.config import Settings, get_settings
from doctor_portal.database import Database
from doctor_portal.exceptions import PortalError, internal_error_response
from doctor_portal.logging_config import RequestIDMiddleware, get_logger, setup_structured_logging
from doctor_portal.routers import bookings, catalog, doctors, users

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings = app.state.settings or get_settings()
    setup_structured_logging(settings.log_level, settings.log_json)

    # Startup: open the database and make sure tables exist
    db = Database(settings.database_url, echo=settings.database_echo)
    await db.create_all()
    app.state.db = db
    logger.info("database_ready", dialect=db.dialect)
    yield
    # Shutdown
    await db.dispose()
    logger.info("database_closed")


async def portal_error_handler(request: Request, exc: PortalError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("database_error", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Database error"})


async def unhandled_error_handler(request: Request, exc: Exception):
    # Last resort for failures outside RequestIDMiddleware, which renders the rest
    logger.error("unhandled_error", exc_info=exc)
    return internal_error_response()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API. Settings are resolved from the environment at startup when not given."""
    app = FastAPI(
        title="Doctors Portal",
        description="Clinic appointment booking: services, slots, bookings, doctors and user roles",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Added first so CORS wraps it and decorates its error responses too
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PortalError, portal_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(catalog.router, tags=["Services"])
    app.include_router(users.router, tags=["Users"])
    app.include_router(bookings.router, tags=["Bookings"])
    app.include_router(doctors.router, tags=["Doctors"])

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Hello"

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "service": "doctors-portal"}

    return app


app = create_app()
