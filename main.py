from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from jobly.core.config import settings
from jobly.core.database import init_db
from jobly.core.errors import JoblyError, jobly_error_handler, validation_error_handler
from jobly.core.logging_config import get_logger, setup_logging
from jobly.api.endpoints import companies, health, jobs, users

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    setup_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)

    logger.info(f"Starting up {settings.PROJECT_NAME}...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Companies, jobs and the users who apply to them",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(JoblyError, jobly_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

# Include routers
app.include_router(health.router)
app.include_router(companies.router)
app.include_router(jobs.router)
app.include_router(users.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
