#!/usr/bin/env python3
"""
hirematch API - FastAPI Application

Candidate/job matching endpoints for the marketplace dashboards.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from database.database import check_database
from .config import get_config
from .exceptions import (
    ServiceException,
    service_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    general_exception_handler
)
from .routers import (
    candidates_router,
    jobs_router,
    employers_router,
    matching_router
)

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
    title="hirematch API",
    description="Candidate/job compatibility scoring and ranking",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Register exception handlers
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(candidates_router)
app.include_router(jobs_router)
app.include_router(employers_router)
app.include_router(matching_router)


@app.get("/health")
def health_check():
    """Health check endpoint. Reports degraded when the database is unreachable."""
    database_ok = check_database()
    return {
        "status": "healthy" if database_ok else "degraded",
        "service": "hirematch-web",
        "database": "ok" if database_ok else "unreachable",
        "llm": "configured" if config.llm.enabled else "disabled",
    }


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting hirematch API on {config.web.host}:{config.web.port}")
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
