"""
Blog Journal - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import os

from cachelib import SimpleCache
from flask import Flask
from sqlalchemy.engine import make_url
from journal.extensions import db, login_manager, sess
from journal.config import Config
from journal.middleware import MethodOverrideMiddleware


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # HTML forms can only POST; ?_method=PUT|DELETE picks the real verb
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    # The session store opens the database during init_app
    _ensure_sqlite_directory(app.config['SQLALCHEMY_DATABASE_URI'])
    if app.config['SESSION_TYPE'] == 'cachelib' and app.config.get('SESSION_CACHELIB') is None:
        app.config['SESSION_CACHELIB'] = SimpleCache()

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    sess.init_app(app)
    app.logger.info('Session store ready (%s)', app.config['SESSION_TYPE'])

    # Register blueprints
    from journal.auth import auth_bp
    from journal.main import main_bp
    from journal.posts import posts_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(main_bp)
    app.register_blueprint(posts_bp)

    from journal.errors import register_error_handlers
    register_error_handlers(app)

    @app.context_processor
    def inject_site_name():
        """Inject the site name into every template."""
        return dict(site_name=app.config['SITE_NAME'])

    # Create database tables
    with app.app_context():
        from journal import models  # noqa: F401
        db.create_all()
        app.logger.info('Database connected')

    return app


def _ensure_sqlite_directory(uri):
    """Create the parent directory of an absolute SQLite database file.

    Relative SQLite paths live under app.instance_path, which
    Flask-SQLAlchemy creates itself.
    """
    url = make_url(uri)
    if url.get_backend_name() != 'sqlite':
        return
    database = url.database
    if not database or database == ':memory:' or database.startswith('file:'):
        return
    if os.path.isabs(database):
        os.makedirs(os.path.dirname(database), exist_ok=True)
