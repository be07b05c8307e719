"""
FastAPI Application
==================
Main entry point for the Convert Styling API.

The migration guide named by ``CONVERT_STYLING_GUIDE_PATH`` (or the bundled
one) is loaded once at startup, so a misconfigured guide stops the server
instead of failing every request.

Run with:
    uvicorn convert_styling.web_api.main:app --reload
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from convert_styling import __version__
from convert_styling.errors import GuideUnavailableError
from convert_styling.guides import load_guide
from convert_styling.web_api.config import settings
from convert_styling.web_api.routers import convert, health

_logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    guide = load_guide(settings.GUIDE_PATH)
    _logger.info("Loaded migration guide %s (sha1 %s)", guide.uri, guide.sha1)
    app.state.guide = guide
    yield
    app.state.guide = None


# Create application
app = FastAPI(
    title="Convert Styling API",
    description="NativeWind to Uniwind source migration engine",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GuideUnavailableError)
async def guide_unavailable_handler(request: Request, exc: GuideUnavailableError):
    """Per-request guide loads that fail are a server-side outage, not a client error."""
    _logger.error("%s", exc)
    return JSONResponse(
        status_code=503,
        content={"detail": str(exc), "error": exc.kind.value},
    )


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(convert.router, prefix="/convert", tags=["Convert"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Convert Styling API",
        "version": __version__,
        "guide_preloaded": getattr(app.state, "guide", None) is not None,
    }


# For running directly: python -m convert_styling.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
