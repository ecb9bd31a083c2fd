"""FastAPI REST API for the tabletop configurator.

Provides endpoints for parsing uploaded drawings, resolving configuration
changes and estimating prices.

Usage:
    uvicorn tabletops.web:app --reload
"""

from tabletops.web.app import app, create_app

__all__ = ["app", "create_app"]
