import logging

from flask import Flask, jsonify
from config import Config
from pymysql import connect
from sqlalchemy.engine import make_url
from .extensions import cors, db, migrate, jwt
from .errors import register_error_handlers
from .models import *
from .routes.health_routes import health_bp
from .routes.profile_routes import profile_bp
from .routes.library_routes import library_bp
from .routes.cv_routes import cv_bp
from .routes.application_routes import application_bp
from .routes.snapshot_routes import snapshot_bp
from .commands import init_db, issue_token
from .database.seed.seed_all import seed_all

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Allow CORS from the front-end
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    uri = app.config["SQLALCHEMY_DATABASE_URI"]
    if app.config.get("ENSURE_DATABASE") and uri.startswith("mysql"):
        create_database_if_not_exists(uri)

    # extensions initialization
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    register_jwt_handlers()
    register_error_handlers(app)

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(profile_bp, url_prefix="/api/profile")
    app.register_blueprint(library_bp, url_prefix="/api/profile/library")
    app.register_blueprint(cv_bp, url_prefix="/api/cv")
    app.register_blueprint(application_bp, url_prefix="/api/applications")
    app.register_blueprint(snapshot_bp, url_prefix="/api")

    app.cli.add_command(init_db)
    app.cli.add_command(issue_token)
    app.cli.add_command(seed_all)

    return app


def register_jwt_handlers():
    """Render token failures with the same error envelope as everything else."""

    def unauthorized(message):
        return jsonify({"status": "error", "error": "Unauthorized", "message": message}), 401

    @jwt.unauthorized_loader
    def missing_token(reason):
        return unauthorized(reason)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return unauthorized(reason)

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return unauthorized("Token has expired")


def create_database_if_not_exists(uri):
    url = make_url(uri)
    host = url.host or "localhost"
    port = url.port or 3306

    logger.info(f"🔧 Ensuring database '{url.database}' exists on {host}:{port} as '{url.username}'")

    conn = connect(
        host=host,
        port=port,
        user=url.username,
        password=url.password or ""
    )
    try:
        with conn.cursor() as cursor:
            cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{url.database}`")
        conn.commit()
    finally:
        conn.close()
