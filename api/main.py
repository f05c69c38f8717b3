"""
Operations Dashboard API - Main Application.

FastAPI application with CORS enabled for the dashboard frontend.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from config.settings import get_settings

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI application
app = FastAPI(
    title="Operations Dashboard API",
    description="REST API for the sales pipeline, marketing leads and operations dashboard",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS - Allow all origins for development
# TODO: Restrict origins to the dashboard host once it is deployed
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["Health"])
def health_check():
    """
    Health check endpoint.

    Returns the API status and version.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "service": "operations-dashboard-api"
    }


@app.get("/", tags=["Root"])
def root():
    """
    Root endpoint with API information.
    """
    return {
        "message": "Operations Dashboard API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


# Import and include routers
from api.routers import dashboard, leads, operations, pipeline, quotes

app.include_router(dashboard.router, prefix="/api/v1", tags=["Dashboard"])
app.include_router(pipeline.router, prefix="/api/v1", tags=["Pipeline"])
app.include_router(leads.router, prefix="/api/v1", tags=["Leads"])
app.include_router(quotes.router, prefix="/api/v1", tags=["Quotes"])
app.include_router(operations.router, prefix="/api/v1", tags=["Operations"])
