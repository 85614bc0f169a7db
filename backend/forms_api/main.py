"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from forms_api.api.routes import form_schema, submissions
from forms_api.core.config import settings
from forms_api.core.errors import StorageError, SubmissionValidationError
from forms_api.core.logging import get_logger, setup_logging
from forms_api.db.session import engine, init_models

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging("DEBUG" if settings.APP_ENV == "development" else "INFO")
    await init_models()
    logger.info(
        "Application starting",
        env=settings.APP_ENV,
        database=settings.DATABASE_PATH,
    )
    yield
    await engine.dispose()
    logger.info("Application shutting down")


app = FastAPI(
    title="Employee Form API",
    description="Serves the employee form schema, validates and stores submissions",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(form_schema.router, prefix=settings.API_PREFIX)
app.include_router(submissions.router, prefix=settings.API_PREFIX)


@app.exception_handler(SubmissionValidationError)
async def submission_validation_handler(
    request: Request, exc: SubmissionValidationError
) -> JSONResponse:
    """User-correctable: return the per-field messages as-is."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "errors": exc.errors},
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Not user-correctable: log for operators, answer with a generic envelope."""
    logger.error(
        "Storage failure",
        operation=exc.operation,
        path=request.url.path,
        error=str(exc.__cause__ or exc),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": exc.message},
    )


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}
