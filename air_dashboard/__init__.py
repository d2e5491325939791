"""
Air Quality Dashboard - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging

from flask import Flask

from air_dashboard.config import Config


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    # Register blueprints
    from air_dashboard.dashboard import dashboard_bp

    app.register_blueprint(dashboard_bp)

    # Template filter for AQI tier
    @app.template_filter('aqi_level')
    def aqi_level_filter(aqi):
        from air_dashboard.services.aqi import calculate_aqi_status
        return calculate_aqi_status(aqi)['level']

    return app
