import logging
import os

from flask import Flask
from flask_cors import CORS

from coachmarket.config import config
from coachmarket.extensions import db, ma, migrate
from coachmarket import models  # noqa: F401  registers the tables on db.metadata

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(app):
    level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    app.logger.setLevel(level)


def create_app(config_name=None):
    config_name = config_name or os.getenv("COACHMARKET_CONFIG", "default")

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    app.json.sort_keys = False

    configure_logging(app)

    db.init_app(app)
    ma.init_app(app)
    migrate.init_app(app, db)
    CORS(app, resources={r"/*": {
        "origins": app.config["CORS_ORIGINS"],
        "allow_headers": ["Content-Type"],
        "methods": ["GET", "POST", "OPTIONS"]
    }})

    from coachmarket.routes import rpc_bp
    from coachmarket.commands import register_commands

    app.register_blueprint(rpc_bp)
    register_commands(app)

    app.logger.info("Coach market started with %s config", config_name)
    return app
