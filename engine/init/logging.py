# engine/init/logging.py

"""
Logging Configuration

Rotating log files levelled by environment, or console-only logging under
TESTING.
"""

import logging
import os
from logging.config import dictConfig

from engine.log_config.logging_config import LOG_DIR, build_logging_config

CONSOLE_FORMAT = '%(asctime)s [%(levelname)s] %(name)s - %(message)s'


def init_logging(app):
    """
    Initialize logging for the application's environment.

    Args:
        app: The Flask application instance.
    """
    environment = app.config.get('ENVIRONMENT')

    if app.config.get('TESTING'):
        # Console only, so tests never create log files
        logging.basicConfig(level=logging.WARNING, format=CONSOLE_FORMAT, force=True)
    else:
        os.makedirs(LOG_DIR, exist_ok=True)
        dictConfig(build_logging_config(environment))

    app.logger.setLevel(logging.DEBUG if environment == 'development' else logging.INFO)
    logging.getLogger(__name__).debug(f"Logging configured for environment '{environment}'")
