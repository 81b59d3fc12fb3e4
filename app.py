from flask import Flask
from dotenv import load_dotenv

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from extensions import STORE_KEY, db, login_manager  # noqa: E402  (load_dotenv needs to run first)
from logging_setup import setup_logging  # noqa: E402
from storage import build_store  # noqa: E402


def create_app(test_config: dict | None = None) -> Flask:
    """Application factory for the farm manager API."""

    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    setup_logging(app.config["LOG_LEVEL"])

    # init extensions
    login_manager.init_app(app)

    @login_manager.unauthorized_handler
    def unauthorized():
        return "", 401

    # record store
    backend = app.config["STORE_BACKEND"]
    if backend == "sql":
        db.init_app(app)
        with app.app_context():
            # models must be imported before create_all()
            import models  # noqa: F401

            db.create_all()
    app.extensions[STORE_KEY] = build_store(backend)
    app.logger.info("Record store backend: %s", backend)

    from errors import register_error_handlers
    register_error_handlers(app)

    # blueprints
    from modules.auth import bp as auth_bp
    from modules.crops import bp as crops_bp
    from modules.inventory import bp as inventory_bp
    from modules.tasks import bp as tasks_bp
    from modules.dashboard import bp as dashboard_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(crops_bp)
    app.register_blueprint(inventory_bp)
    app.register_blueprint(tasks_bp)
    app.register_blueprint(dashboard_bp)

    if app.config.get("SEED_DEMO"):
        from seed_demo import run as seed_demo
        with app.app_context():
            seed_demo()

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
