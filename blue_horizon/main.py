"""
Main FastAPI application for Blue Horizon API
"""

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from typing import Optional
import logging

from . import __version__
from .core.config import settings
from .api.dependencies import get_sample_source
from .api.endpoints import status, trends
from .storage import SampleSource

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Create FastAPI app
app = FastAPI(
    title="Blue Horizon API",
    description="Water quality monitoring backend for the Blue Horizon dashboard",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Root endpoint
@app.get("/", response_class=PlainTextResponse)
async def root():
    """Root endpoint"""
    return "Blue Horizon API is running!"


# Health check endpoint
@app.get("/health")
async def health_check(source: Optional[SampleSource] = Depends(get_sample_source)):
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "Blue Horizon API",
        "version": __version__,
        "dataSource": source.name if source is not None else "mock",
    }


# Include API routers
app.include_router(trends.router, prefix="/api")
app.include_router(status.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "blue_horizon.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False
    )
