import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .logging_setup import setup_logging
from .repositories import TaskStore, get_task_store
from .routers import dashboard as dashboard_router
from .routers import tasks as tasks_router
from .settings import get_settings

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "tasks",
        "description": "Read-only task listing with status, priority and text filters.",
    },
    {
        "name": "dashboard",
        "description": "Derived views: notifications, statistics, calendar day and the full dashboard.",
    },
]

_settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Root logging is configured by the served app, not by importing the package.
    setup_logging(level=_settings.log_level, log_file=_settings.log_file)
    # Load the task store eagerly so a malformed tasks file fails at startup.
    store = get_task_store()
    logger.info("Task dashboard ready with %d tasks", len(store))
    yield


app = FastAPI(
    title="Task Dashboard Backend",
    description="Read-only API deriving notifications, statistics and filtered views over a fixed task list.",
    version="0.1.0",
    openapi_tags=openapi_tags,
    lifespan=lifespan,
)

# Configure CORS based on settings (CORS_ALLOW_ORIGINS), with '*' fallback
allow_all = (_settings.cors_allow_origins == ["*"]) or (len(_settings.cors_allow_origins) == 0)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if allow_all else _settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Global exception handlers for consistent JSON on validation errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for request validation errors.

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=422,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


# PUBLIC_INTERFACE
@app.get("/", summary="Health Check", tags=["health"])
def health_check(store: TaskStore = Depends(get_task_store)):
    """
    Health check endpoint.

    Returns:
        A JSON object indicating service health and the number of loaded tasks.
    """
    return {"message": "Healthy", "tasks": len(store)}


# Include routers
app.include_router(tasks_router.router)
app.include_router(dashboard_router.router)
