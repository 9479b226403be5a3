from flask import Flask
from tours.extensions import db, migrate, jwt
from flask_cors import CORS
from config import Config



def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    CORS(app) # Enable CORS for all routes

    # Make sure models are registered before create_all / migrations
    from tours import models  # noqa: F401

    # Register Blueprints
    from tours.api import register_blueprints
    register_blueprints(app)

    from tours.db_init.cli import register_commands
    register_commands(app)

    return app
