"""
flighttrack Flask Application.

Main entry point for the web application. Initializes:
- Logging
- Data store client and flight service
- API routes
- Health and error handlers

Usage:
    python -m flighttrack.app

Or with gunicorn:
    gunicorn 'flighttrack.app:create_app()'
"""

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from flask import Flask
from flask_cors import CORS

from flighttrack.config import config
from flighttrack.api import flights_bp
from flighttrack.services import FlightService

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


def create_app(flight_service: Optional[FlightService] = None) -> Flask:
    """
    Application factory for Flask.

    Args:
        flight_service: Service to serve requests with. Built from
                        configuration when omitted; pass a stub for testing.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = config.secret_key

    # Enable CORS for API endpoints
    CORS(app, resources={r'/flights.*': {'origins': '*'}})

    if flight_service is None:
        if not config.datastore.is_configured:
            logger.warning('No data store configured. Set DB_URL in .env')
        flight_service = FlightService.from_config()
    app.config['FLIGHT_SERVICE'] = flight_service

    # Register API blueprints
    app.register_blueprint(flights_bp)

    started_at = time.monotonic()

    @app.route('/health')
    def health():
        """Simple health check endpoint."""
        return {
            'status': 'healthy',
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'uptime': round(time.monotonic() - started_at, 3),
        }

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Not found'}, 404

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return {'error': 'Internal server error'}, 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()

    port = config.server.port

    logger.info(f'Starting flighttrack on http://localhost:{port}')
    logger.info(f'Data store: {config.datastore.url or "not configured"}')

    app.run(
        host=config.server.host,
        port=port,
        debug=config.debug,
    )


if __name__ == '__main__':
    run_development_server()
