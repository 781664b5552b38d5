"""FastAPI HTTP server setup."""

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging

from tasklist import __version__
from tasklist.config import settings
from tasklist.store import TaskStore, get_store, task_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    # Startup
    logger.info(f"Starting Tasklist server with {task_store.count()} tasks")

    yield

    # Shutdown
    logger.info("Tasklist server shut down, in-memory tasks discarded")


# Create FastAPI app
app = FastAPI(
    title="Tasklist",
    description="In-memory task list over a small JSON CRUD API",
    version=__version__,
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def format_validation_error(exc: RequestValidationError) -> str:
    """Flatten validation errors into one '<loc>: <msg>' string."""
    parts = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{loc}: {error.get('msg')}" if loc else str(error.get("msg")))
    return "; ".join(parts)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Undecodable request bodies become 400 with an 'error' field."""
    message = format_validation_error(exc)
    logger.debug(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"message": detail}, or {"error": detail} for a bad request."""
    key = "error" if exc.status_code == 400 else "message"
    return JSONResponse(
        status_code=exc.status_code,
        content={key: exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Log unexpected failures and answer 500 instead of dropping the request."""
    logger.error(f"Error handling {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# Import and include routers
from .endpoints import router

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Tasklist",
        "version": __version__,
        "status": "running"
    }


@app.get("/health")
async def health(store: TaskStore = Depends(get_store)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "tasks": store.count()
    }
