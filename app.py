"""
Portfolio Site - Main Application Entry Point
Application Factory Pattern with one Blueprint per site section

This module creates the Flask application, loads its configuration and wires
blueprints, error handlers and response hooks. Page rendering is delegated
to the blueprints and the shared layout in components/.
"""

import os
from flask import Flask, request
from config import get_config
from components import Head, NAME, SITE_TITLE, render_page
from utils.ui_helpers import inject_blueprint_assets, get_page_specific_class

# Import all blueprints
from blueprints.pages import pages_bp
from blueprints.posts import posts_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': f'{SITE_TITLE} is running'}, 200

    return app


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(posts_bp)
    app.logger.debug(f"Registered blueprints: {', '.join(app.blueprints)}")


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        app.logger.info(f"Page not found: {request.path}")
        return render_page('404.html', head=Head(title='404: This page could not be found')), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_page('500.html', head=Head(title='500: Internal Server Error')), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Values every template can read"""
        blueprint_assets = inject_blueprint_assets()

        page_class = get_page_specific_class(
            blueprint_assets.get('current_blueprint'),
            request.endpoint.split('.')[-1] if request.endpoint else None
        )

        return {
            'site_title': SITE_TITLE,
            'name': NAME,
            'blueprint_styles': blueprint_assets.get('blueprint_styles', []),
            'util_styles': blueprint_assets.get('util_styles', {}),
            'page_class': page_class
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = app.config['CONTENT_SECURITY_POLICY']
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response


# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
