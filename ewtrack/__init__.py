import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .config import Config
from .errors import LifecycleError
from .extensions import db, login_manager, migrate

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


def _configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    app.logger.setLevel(level)


def _register_error_handlers(app):
    @app.errorhandler(LifecycleError)
    def lifecycle_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({"success": False, "message": error.description}), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        logger.exception("Unhandled error: %s", error)
        db.session.rollback()
        return jsonify({"success": False, "message": INTERNAL_ERROR_MESSAGE}), 500


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    uri = app.config.get("SQLALCHEMY_DATABASE_URI")
    if not uri:
        raise RuntimeError("DATABASE_URL is not defined.")
    if uri.startswith("sqlite"):
        # SQLite uses a single static/null pool; pool sizing options do not apply
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {}

    _configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({"success": False, "message": "Authentication required."}), 401

    from .routes import main_bp, auth_bp
    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)

    _register_error_handlers(app)

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    with app.app_context():
        from . import models  # noqa: F401
        db.create_all()

    logger.info("ewtrack app created (pickup offset %s days)", app.config["PICKUP_DATE_OFFSET_DAYS"])
    return app
