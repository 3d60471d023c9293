"""
Todo API - Application factory and initialization
"""
import os

import structlog
from flask import Flask

from todo_api.constants import API_VERSION, DEV_JWT_SECRET
from todo_api.db import db, init_db
from todo_api.exceptions import register_exception_handlers
from todo_api.logging_setup import configure_logging
from todo_api.middleware.rate_limit import limiter
from todo_api.routes.auth import auth_bp
from todo_api.routes.system import system_bp
from todo_api.routes.task_lists import task_lists_bp
from todo_api.routes.tasks import tasks_bp
from todo_api.settings import load_settings

logger = structlog.get_logger('main')


def build_config(settings):
    """Flask config keys derived from the merged settings"""
    jwt_secret = settings["auth"].get("jwt_secret")
    if not jwt_secret:
        logger.warning("JWT_SECRET is not set, using the development secret")
        jwt_secret = DEV_JWT_SECRET

    return {
        "SQLALCHEMY_DATABASE_URI": settings["database"]["url"],
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "JWT_SECRET": jwt_secret,
        "TOKEN_EXPIRES_HOURS": settings["auth"]["token_expires_hours"],
        "RATELIMIT_LOGIN": settings["auth"]["login_rate_limit"],
        "RATELIMIT_ENABLED": True,
    }


def create_app(config_overrides=None):
    """Application factory"""
    settings = load_settings()
    configure_logging(settings["logging"]["level"], settings["logging"]["format"])

    app = Flask(__name__)
    app.config.update(build_config(settings))
    if config_overrides:
        app.config.update(config_overrides)
    app.json.sort_keys = False

    # Initialize components
    db.init_app(app)
    limiter.init_app(app)

    # Register exception handlers
    register_exception_handlers(app)

    # Register blueprints
    app.register_blueprint(system_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(task_lists_bp)
    app.register_blueprint(tasks_bp)

    # Initialize database
    init_db(app)

    return app


def main():
    app = create_app()
    port = int(os.environ.get("PORT", 3000))
    logger.info(f"Todo API {API_VERSION} starting on port {port}...")
    app.run(host="0.0.0.0", port=port, debug=False, use_reloader=False)


if __name__ == '__main__':
    main()
