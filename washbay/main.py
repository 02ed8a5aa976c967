"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from washbay.config import get_settings
from washbay.database import init_db
from washbay.exceptions import AuthRequiredError, RemoteError, WashBayError
from washbay.logging_config import setup_logging
from washbay.routers import admin, auth, plates, reports, services, vehicles

settings = get_settings()

setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events for the application.
    Handles startup and shutdown events.
    """
    # Startup
    logger.info("Starting %s %s", settings.app_name, settings.app_version)
    await init_db()
    logger.info("API available at %s", settings.api_v1_prefix)

    yield

    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    ## Wash Bay Manager API

    Tracks vehicles through the wash pipeline and reports revenue per service.

    ### Entities:
    * **Vehicles**: checked in as waiting, moved to in-progress and completed
    * **Services**: priced catalog entries attached to vehicles
    * **Reports**: per-service counts and revenue over completed vehicles
    * **Profiles**: sign-up, login and the admin user list
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(WashBayError)
async def handle_washbay_error(request: Request, exc: WashBayError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthRequiredError) else None
    if isinstance(exc, RemoteError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)


@app.exception_handler(SQLAlchemyError)
async def handle_database_error(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    error = RemoteError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


# Include routers
app.include_router(auth.router, prefix=settings.api_v1_prefix)
app.include_router(vehicles.router, prefix=settings.api_v1_prefix)
app.include_router(services.router, prefix=settings.api_v1_prefix)
app.include_router(reports.router, prefix=settings.api_v1_prefix)
app.include_router(plates.router, prefix=settings.api_v1_prefix)
app.include_router(admin.router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": f"Welcome to {settings.app_name} API",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "washbay.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
