#!/usr/bin/env python3
"""
Compatibility Web Service - FastAPI Application

Exposes the compatibility engine as a JSON API with automatic documentation.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI, HTTPException

from compatibility.exceptions import CompatibilityError

from .config import get_config
from .exceptions import (
    ServiceException,
    service_exception_handler,
    compatibility_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import compatibility_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load configuration
config = get_config()

# Create FastAPI app
app = FastAPI(
    title="Compatibility API",
    description="API for scoring requester/listing compatibility",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Register exception handlers
app.add_exception_handler(CompatibilityError, compatibility_exception_handler)
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(compatibility_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "compatibility-web"}


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting Compatibility Web Server on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
