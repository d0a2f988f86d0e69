"""Flask application entry point."""

import logging
from flask import Flask, jsonify
from flask_cors import CORS

from .config import settings
from .api.time_zone import apply_client_time_zone, release_client_time_zone
from .exceptions import ValidationError, DateNormError
from .timezones import registry

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Create Flask app
app = Flask(__name__)

# CORS configuration; the time zone header must be allowed cross-origin
CORS(
    app,
    origins=settings.cors_origins,
    allow_headers=["Content-Type", settings.time_zone_header],
    supports_credentials=True
)


# Time zone initialization (runs once on app startup)
def initialize_time_zones():
    """Apply the configured server time zone.

    A bad configuration value is logged and the server zone stays UTC.
    """
    resolution = registry.set_server_zone(settings.server_time_zone)
    if resolution:
        logger.info(f"Server time zone set to {resolution.zone.key}")
    else:
        logger.error(
            f"Server time zone {settings.server_time_zone!r} could not be applied "
            f"({resolution.error}); using {registry.current_server_zone().key}"
        )
    return resolution


initialize_time_zones()


# Client time zone is bound for each request before its body is decoded
app.before_request(apply_client_time_zone)
app.teardown_request(release_client_time_zone)


# Error handlers
@app.errorhandler(ValidationError)
def handle_validation_error(error):
    """Handle ValidationError exceptions (client input faults)."""
    response = {
        "error": {
            "type": error.__class__.__name__,
            "message": error.message
        }
    }
    if error.details:
        response["error"]["details"] = error.details
    return jsonify(response), 400


@app.errorhandler(DateNormError)
def handle_date_norm_error(error):
    """Handle generic DateNormError exceptions."""
    response = {
        "error": {
            "type": error.__class__.__name__,
            "message": error.message
        }
    }
    if error.details:
        response["error"]["details"] = error.details
    return jsonify(response), 500


@app.errorhandler(500)
def handle_internal_error(error):
    """Handle internal server errors."""
    logger.error(f"Internal error: {error}")
    return jsonify({
        "error": {
            "type": "InternalServerError",
            "message": "An internal error occurred"
        }
    }), 500


# Health check endpoint
@app.route("/health")
def health():
    """Health check endpoint."""
    return jsonify({
        "status": "ok",
        "server_time_zone": registry.current_server_zone().key
    })


# Register API blueprints
from .api.v1 import api_v1_bp

app.register_blueprint(api_v1_bp, url_prefix=settings.api_v1_prefix)


if __name__ == "__main__":
    app.run(debug=True)
