# AuraBoard/app.py

import importlib
import os

from flask import Blueprint, Flask, jsonify
from werkzeug.exceptions import HTTPException

from AuraBoard.config import Config
from AuraBoard.extensions import cors, db, mail, migrate
from AuraBoard.services.errors import MoodboardError

# Registers models with SQLAlchemy metadata
import AuraBoard.models  # noqa: F401


# ---------------------------------------------------------
# App Factory
# ---------------------------------------------------------
def create_app(config_object=Config):
    base_dir = os.path.abspath(os.path.dirname(__file__))

    app = Flask(
        __name__,
        template_folder=os.path.join(base_dir, "templates"),
        static_folder=os.path.join(base_dir, "static"),
        instance_relative_config=True,
    )

    # Core configuration
    app.config.from_object(config_object)
    app.secret_key = app.config.get("SECRET_KEY")

    # Initialize extensions
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})
    db.init_app(app)
    migrate.init_app(app, db)
    mail.init_app(app)

    # Register all route blueprints dynamically
    register_blueprints(app)

    # -----------------------------------------------------
    # Error handlers
    # -----------------------------------------------------
    @app.errorhandler(MoodboardError)
    def handle_moodboard_error(e):
        if e.http_status >= 500:
            app.logger.error("%s failed at stage %s: %s", e.__class__.__name__, e.stage, e.message)
        return jsonify(e.to_dict()), e.http_status

    @app.errorhandler(Exception)
    def handle_any_exception(e):
        if isinstance(e, HTTPException):
            return e
        app.logger.exception("Unhandled error")
        return jsonify({"error": "Internal server error", "stage": "unknown"}), 500

    @app.route("/healthz")
    def healthz():
        return jsonify({"status": "ok"})

    return app


# ---------------------------------------------------------
# Dynamic Blueprint Registration
# ---------------------------------------------------------
def register_blueprints(app):
    routes_dir = os.path.join(os.path.dirname(__file__), "routes")
    if not os.path.exists(routes_dir):
        app.logger.warning("No routes folder found.")
        return

    for file in sorted(os.listdir(routes_dir)):
        if file.endswith(".py") and not file.startswith("__"):
            mod = importlib.import_module(f"AuraBoard.routes.{file[:-3]}")
            for attr in dir(mod):
                obj = getattr(mod, attr)
                if isinstance(obj, Blueprint):
                    app.register_blueprint(obj)
                    app.logger.debug("Registered blueprint: %s -> %s", obj.name, obj.url_prefix)


if __name__ == "__main__":
    app = create_app()
    print("\nRegistered routes:")
    for rule in app.url_map.iter_rules():
        print(f"{rule.endpoint:40s} -> {rule.rule}")

    app.run(host="0.0.0.0", port=5050, debug=True, use_reloader=False)
