"""Flask application factory and initialization."""
import logging

from flask import Flask, jsonify
from backend.app.config import Config
from backend.app.extensions import init_extensions
from backend.app import db


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    init_extensions(app)

    # Unique username index is required for registration conflicts
    if not app.testing:
        with app.app_context():
            if not db.ensure_indexes():
                logging.getLogger(__name__).warning('Could not ensure DB indexes at startup')

    @app.route('/api/health')
    def health_check():
        """Health check endpoint with database connectivity."""
        response = {
            "status": "ok",
            "service": "bloglist-api"
        }
        db_health = db.health_check()
        response["database"] = db_health
        if db_health.get("status") != "healthy":
            response["status"] = "degraded"
        return jsonify(response)

    register_blueprints(app)

    # Add CORS headers for browser clients
    @app.after_request
    def after_request(response):
        response.headers['Access-Control-Allow-Origin'] = '*'
        response.headers['Access-Control-Allow-Methods'] = 'GET, POST, PUT, DELETE, OPTIONS'
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type, Authorization'
        return response

    app.logger.info("Bloglist API initialized (database=%s)", app.config.get('MONGO_DB'))
    return app


def register_blueprints(app):
    """Register Flask blueprints with the application.

    Args:
        app: Flask application instance
    """
    # Import API blueprints here to avoid circular imports
    from backend.app.blueprints.api.blogs.routes import blogs_bp
    from backend.app.blueprints.api.users.routes import users_bp
    from backend.app.blueprints.api.login.routes import login_bp
    from backend.app.blueprints.api.stats.routes import stats_bp

    app.register_blueprint(blogs_bp, url_prefix='/api/blogs')
    app.register_blueprint(users_bp, url_prefix='/api/users')
    app.register_blueprint(login_bp, url_prefix='/api/login')
    app.register_blueprint(stats_bp, url_prefix='/api/stats')
