"""
Book Club Search API
Serves the club search box: query optimization, Google Books lookup, popularity ranking
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import sys

from book_search import __version__
from book_search.config import settings
from book_search.router.search import router as search_router

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the provider and ranking setup on startup"""
    logger.info(f"Starting Book Club Search {__version__}")
    logger.info(
        f"Google Books: {settings.google_books_base_url} "
        f"(api key {'set' if settings.google_books_api_key else 'not set'}, "
        f"max {settings.google_books_max_results} results)"
    )
    logger.info(f"Popularity ranking {'enabled' if settings.ranking_enabled else 'disabled'}")

    yield

    logger.info("Shutting down Book Club Search")


app = FastAPI(
    title="Book Club Search",
    description="Google Books search with query optimization and popularity ranking",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(search_router)


@app.get("/")
async def root():
    return {"service": "Book Club Search", "version": __version__}


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "book-search"}


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Anything the router did not map becomes a plain 500"""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error": str(exc) if settings.debug else "An error occurred"
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "book_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level
    )
