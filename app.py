import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import Config
from routes import (
    health_bp,
    properties_bp,
    booking_bp,
    booking_flow_bp,
    payments_bp,
    webhook_bp,
)

from models import db
from flask_migrate import Migrate


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Register routes
    app.register_blueprint(health_bp)
    app.register_blueprint(properties_bp)
    app.register_blueprint(booking_bp)
    app.register_blueprint(booking_flow_bp)
    app.register_blueprint(payments_bp)
    app.register_blueprint(webhook_bp)

    # Database init
    db.init_app(app)

    # Migrations
    Migrate(app, db)

    @app.errorhandler(HTTPException)
    def _http_error(exc):
        return jsonify(error=exc.description), exc.code

    @app.errorhandler(Exception)
    def _unhandled_error(exc):
        db.session.rollback()
        app.logger.exception("Unhandled error")
        return jsonify(error="Internal server error"), 500

    @app.after_request
    def add_security_headers(resp):
        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["X-Frame-Options"] = "DENY"
        resp.headers["Referrer-Policy"] = "no-referrer"
        resp.headers["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"
        resp.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none';"
        return resp


    register_cli(app)


    return app

#-------------------------
import click
from utils.seed import seed_properties

def register_cli(app):
    @app.cli.command("seed-properties")
    def seed_properties_command():
        """Insert the demo property catalogue (idempotent)."""
        added = seed_properties()
        click.echo(f"{added} properties added")

#-------------------------




if __name__ == "__main__":
    app = create_app()
    # Run locally
    app.run(host="127.0.0.1", port=5002)
