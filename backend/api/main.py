"""
FastAPI application entry point.

Run with: python -m api.main

main() sets up logging before starting uvicorn; a bare `uvicorn api.main:app`
leaves the root logger unconfigured and the startup banner is not shown.
"""
import json
import logging
from pathlib import Path
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.routes import books, site
from repositories import BooksRepository
from settings import settings

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Origin, X-Requested-With, Content-Type, Accept",
}


def error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


def _is_json_content_type(value: str) -> bool:
    media_type = value.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """Attach allow-all CORS headers to every response and answer preflights."""

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response


async def catch_unhandled_errors(request: Request, call_next):
    """Turn any exception escaping a handler into the generic 500 envelope."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, "Internal server error")


async def parse_json_body(request: Request, call_next):
    """Parse JSON-typed bodies into ``request.state.json_body`` before any route sees them.

    Only objects and arrays are accepted at the top level; anything else, or
    text that does not parse, is answered with 400. Bodies without a JSON
    content type are left unparsed.
    """
    request.state.json_body = None
    if _is_json_content_type(request.headers.get("content-type", "")):
        body = (await request.body()).lstrip()
        if body:
            if body[:1] not in (b"{", b"["):
                return error_response(400, "Invalid JSON format")
            try:
                request.state.json_body = json.loads(body)
            except ValueError:
                return error_response(400, "Invalid JSON format")
    return await call_next(request)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def create_app(repository: Optional[BooksRepository] = None) -> FastAPI:
    """Build the application around ``repository`` (a freshly seeded store by default)."""
    app = FastAPI(
        title="Books API",
        description="CRUD over an in-memory collection of books",
        version="0.1.0",
    )
    app.state.books_repo = repository if repository is not None else BooksRepository()

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Last added runs first: CORS -> error catch-all -> JSON parsing
    app.middleware("http")(parse_json_body)
    app.middleware("http")(catch_unhandled_errors)
    app.add_middleware(PermissiveCORSMiddleware)

    app.include_router(site.router, tags=["site"])
    app.include_router(books.router, prefix="/books", tags=["books"])

    @app.on_event("startup")
    def startup_event():
        """Log the listening address and the available routes."""
        logger.info("Server is running on http://%s:%s", settings.HOST, settings.PORT)
        logger.info("Available endpoints:")
        for endpoint in site.ENDPOINTS:
            method, path = endpoint.split(" ", 1)
            logger.info("  %-6s %s", method, path)

    # Mounted last so API routes always win
    app.mount("/", StaticFiles(directory=str(settings.STATIC_DIR)), name="static")
    return app


app = create_app()


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("api.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)


if __name__ == "__main__":
    main()
