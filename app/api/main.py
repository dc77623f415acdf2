"""
FastAPI application entry point for the Movies API.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.api.config import (
    get_api_host,
    get_api_port,
    get_cors_origins,
    get_log_file,
    get_log_level,
)
from app.api.routers import movies, system
from app.core.errors import NotFoundError, StorageError, ValidationError
from app.core.validation import to_field_errors
from app.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Movies API",
    description="REST API for managing a catalog of movies",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(system.router)
app.include_router(movies.router)


def _error_body(errors) -> dict:
    return {"error": [e.model_dump() for e in errors]}


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(exc.errors))


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    """Malformed request bodies get the same 400 shape as schema violations."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(to_field_errors(exc.errors())),
    )


@app.exception_handler(NotFoundError)
async def handle_not_found(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message})


@app.exception_handler(StorageError)
async def handle_storage_error(request: Request, exc: StorageError):
    # Details are logged by the store; only the generic message goes out.
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": exc.message},
    )


def run():
    """Run the API with uvicorn on API_HOST:PORT."""
    import uvicorn

    configure_api_logging(level=get_log_level(), log_file=get_log_file())
    host, port = get_api_host(), get_api_port()
    logger.info("Server listening on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    run()
