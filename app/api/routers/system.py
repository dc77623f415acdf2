"""
System API endpoints (greeting, health).
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.dependencies import get_movie_store
from app.core.errors import StorageError
from app.core.store import MovieStore

router = APIRouter(tags=["system"])


@router.get("/")
def root():
    """Root endpoint."""
    return {"message": "Hello world!"}


@router.get("/health")
def health_check(store: MovieStore = Depends(get_movie_store)):
    """Health check: store reachable and movie count."""
    try:
        movie_count = store.count()
    except StorageError:
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "store": store.name},
        )
    return {"status": "healthy", "store": store.name, "movies": movie_count}
