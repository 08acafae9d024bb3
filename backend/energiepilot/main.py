"""FastAPI application entry point."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from energiepilot.api.v1.router import api_router
from energiepilot.config import settings
from energiepilot.models.domain.rules import RuleTable
from energiepilot.services.analysis_service import AnalysisService
from energiepilot.services.rule_loader import load_rule_table

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def create_app(rule_table: Optional[RuleTable] = None) -> FastAPI:
    """
    Create the FastAPI application.

    The rule table is loaded exactly once here and kept on the application
    state for the lifetime of the process.

    Args:
        rule_table: Rule table to serve; loaded from settings.RULES_PATH if omitted
    """
    app = FastAPI(
        title="Energiepilot API",
        description="API for matching renovation projects with energy subsidy programs",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if rule_table is None:
        rule_table = load_rule_table(settings.RULES_PATH)
    app.state.rule_table = rule_table
    app.state.analysis_service = AnalysisService(rule_table)

    # Include API router with v1 prefix
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "message": "Energiepilot API",
            "version": "1.0.0",
            "docs": "/api/docs",
        }

    return app


# Create FastAPI application
app = create_app()
