"""Flask application entry point."""

import logging

from flask import Flask, jsonify
from flask_cors import CORS

from .api.responses import envelope
from .config import settings
from .db import close_request_core, init_db
from .exceptions import ThoughtboxError

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Create Flask app
app = Flask(__name__)

# CORS configuration
CORS(app, origins=settings.cors_origins)

# Close the per-request database Core
app.teardown_appcontext(close_request_core)


# Database initialization (runs once on app startup)
def initialize_database():
    """Initialize database on app startup."""
    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise


with app.app_context():
    initialize_database()


# Error handlers
@app.errorhandler(ThoughtboxError)
def handle_thoughtbox_error(error):
    """Translate Thoughtbox exceptions into the response envelope.

    The status code comes from the exception class. ``details`` are logged
    but never returned.
    """
    if error.status_code >= 500:
        logger.error(f"{error.__class__.__name__}: {error.message} {error.details}")
    else:
        logger.info(f"{error.__class__.__name__}: {error.message}")
    return jsonify(envelope(error.message, success=False)), error.status_code


@app.errorhandler(404)
def handle_unknown_route(error):
    """Handle requests to routes that do not exist."""
    return jsonify(envelope("not found", success=False)), 404


@app.errorhandler(405)
def handle_method_not_allowed(error):
    """Handle known routes called with the wrong method."""
    return jsonify(envelope("method not allowed", success=False)), 405


@app.errorhandler(500)
def handle_internal_error(error):
    """Handle internal server errors."""
    logger.error(f"Internal error: {error}")
    return jsonify(envelope("An internal error occurred", success=False)), 500


@app.route("/")
def index():
    """Welcome message."""
    return "Hello world! Welcome to API!"


# Health check endpoint
@app.route("/health")
def health():
    """Health check endpoint."""
    return jsonify({"status": "ok"})


# Register blueprints
from .api.thoughts import thoughts_bp
from .auth.api import auth_bp

app.register_blueprint(auth_bp)
app.register_blueprint(thoughts_bp)


def run():
    """Run the development server on the configured host and port."""
    logger.info(f"Server running on http://{settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port, threaded=True)


if __name__ == "__main__":
    run()
