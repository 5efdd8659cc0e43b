#!/usr/bin/env python3
"""
Trust Signal API - FastAPI Application

Phone verification and resume-based credibility scoring.

Usage:
    python main.py serve

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI

from .dependencies import get_config
from .exceptions import register_exception_handlers
from .routers import verification_router, resume_router
from .routers.resume import add_rate_limit_handlers

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Trust Signal API",
        description="Phone verification and resume credibility scoring",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # Configure rate limiting
    add_rate_limit_handlers(app)

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(verification_router)
    app.include_router(resume_router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "trust-signal"}

    return app


app = create_app()


def main():
    """Run the web server."""
    import uvicorn

    config = get_config()
    logger.info(f"Starting Trust Signal API on {config.web.host}:{config.web.port}")
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
