#!/usr/bin/env python3

import os
import logging

from flask import Flask

from eventplanner.config import Config
from eventplanner.database import connect_database, init_database, bind_database

STATIC_PATH = "/static"
STATIC_FOLDER = os.path.join(os.path.dirname(__file__), '..', 'static')
TEMPLATE_FOLDER = os.path.join(os.path.dirname(__file__), 'templates')

logger = logging.getLogger(__name__)


def create_app(config=None, db=None):
    """Build the Flask application.

    config defaults to Config.from_env(). db defaults to the database named
    by config.database_url. Table creation and seeding run here, so a store
    that cannot be initialized raises before the app is returned.
    """
    config = config or Config.from_env()

    app = Flask(__name__,
                static_url_path = STATIC_PATH,
                static_folder = STATIC_FOLDER,
                template_folder = TEMPLATE_FOLDER)

    app.secret_key = config.secret_key
    app.config['EVENTPLANNER'] = config
    app.logger.setLevel(config.log_level)

    if not config.admin_enabled:
        logger.warning("ADMIN_TOKEN is not set; admin actions are disabled")

    if db is None:
        db = connect_database(config)
    init_database(db, seed=config.seed_data)
    app.extensions['database'] = bind_database(db)

    @app.before_request
    def open_connection():
        db.connect(reuse_if_open=True)

    @app.teardown_request
    def close_connection(exc):
        if not db.is_closed():
            db.close()

    # Register route blueprints
    from eventplanner.routes import register_routes
    register_routes(app)

    return app
