#!/usr/bin/env python3
"""
Main server entry point for the event planner
"""

import logging
import sys

from eventplanner.config import Config


def main():
    config = Config.from_env()
    logging.basicConfig(level=config.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger = logging.getLogger("eventplanner.server")

    from eventplanner.app import create_app
    from eventplanner.database import close_database

    try:
        app = create_app(config)
    except Exception:
        logger.exception("Failed to initialize database.")
        sys.exit(1)

    logger.info(f"Server running on http://localhost:{config.port}")
    try:
        app.run(host='0.0.0.0', port=config.port)
    finally:
        close_database(app.extensions['database'])


if __name__ == '__main__':
    main()
