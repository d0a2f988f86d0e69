"""API v1 endpoints for datenorm.

This module provides the ApiV1 blueprint that aggregates all v1 resources:
- Dates

The ApiV1 blueprint is registered in main.py under settings.api_v1_prefix.
"""

from flask import Blueprint

from . import dates

api_v1_bp = Blueprint("api_v1", __name__)

# dates_bp has url_prefix="/dates", so full path will be /api/v1/dates
api_v1_bp.register_blueprint(dates.dates_bp)

__all__ = ["api_v1_bp"]
