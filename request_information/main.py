"""
Request Information - FastAPI Application Entry Point

Exposes a preview service that builds requests from a JSON description and
shows the URL, headers and body they would be sent with.
"""

from fastapi import FastAPI

from .exceptions import register_exception_handlers
from .routers import prepare


app = FastAPI(
    title="Request Information",
    description="Build and preview abstract HTTP requests",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# Register global exception handlers
register_exception_handlers(app)


@app.get("/")
async def root():
    """Root endpoint returning API information."""
    return {
        "name": "Request Information",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Register routers
app.include_router(prepare.router)
