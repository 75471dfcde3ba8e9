# surveydemo/__init__.py
import logging
import os
from pathlib import Path

import click
from flask import Flask, abort, jsonify, request, send_from_directory

from .bootstrap import run_bootstrap
from .config import config
from .extensions import cors, db
from .routes.answers import bp as answers_bp
from .routes.health import bp as health_bp
from .routes.questions import bp as questions_bp
from .routes.respondents import bp as respondents_bp


def create_app(config_name=None, overrides=None):
    config_name = config_name or os.environ.get("FLASK_CONFIG", "default")
    settings = config[config_name]()

    app = Flask(__name__, static_folder=None)
    app.config.from_object(settings)
    if overrides:
        app.config.update(overrides)
    static_dir = Path(app.config["STATIC_DIR"])
    app.url_map.strict_slashes = False

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    db.init_app(app)
    cors.init_app(app, resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}})

    for bp in (health_bp, respondents_bp, questions_bp, answers_bp):
        app.register_blueprint(bp, url_prefix="/api")

    # every /api/* error is JSON, the frontend never has to parse an HTML page
    @app.errorhandler(404)
    def _404(e):
        if request.path == "/api" or request.path.startswith("/api/"):
            return jsonify({"error": "not found", "path": request.path}), 404
        return e

    @app.errorhandler(405)
    def _405(e):
        if request.path.startswith("/api/"):
            return jsonify({"error": "method not allowed", "path": request.path}), 405
        return e

    @app.errorhandler(413)
    def _413(e):
        if request.path.startswith("/api/"):
            return jsonify({"error": "payload too large"}), 413
        return e

    @app.route("/", defaults={"path": ""})
    @app.route("/<path:path>")
    def index(path):
        if request.path == "/api" or request.path.startswith("/api/"):
            abort(404)
        target = static_dir / path
        if path and target.exists() and target.is_file():
            return send_from_directory(static_dir, path)
        return send_from_directory(static_dir, "index.html")

    @app.cli.command("init-db")
    def init_db_command():
        """Create the tables and seed the questions, then exit."""
        if not run_bootstrap(app):
            raise click.ClickException("database bootstrap failed, see log above")
        click.echo("Database ready.")

    # "background" is started by the process entry point once the app object exists
    if app.config["BOOTSTRAP_MODE"] == "inline":
        run_bootstrap(app)

    return app
