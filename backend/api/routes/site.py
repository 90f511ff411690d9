"""
Landing page and API description routes.
"""
from fastapi import APIRouter
from fastapi.responses import FileResponse

from settings import settings

router = APIRouter()

ENDPOINTS = {
    "GET /books": "Get all books",
    "GET /books/:id": "Get a specific book",
    "POST /books": "Create a new book",
    "PUT /books/:id": "Update a book",
    "DELETE /books/:id": "Delete a book",
}


@router.get("/", include_in_schema=False)
async def index():
    """Serve the landing page."""
    return FileResponse(settings.STATIC_DIR / "index.html")


@router.get("/api")
async def api_info():
    """Describe the available endpoints."""
    return {
        "message": "Welcome to the Books API",
        "endpoints": ENDPOINTS,
    }
