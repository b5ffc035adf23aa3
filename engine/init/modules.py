# engine/init/modules.py

"""
Module Configuration

Run every configured module configuration unit with the application and the
database handle, in configuration order.
"""

import logging

from engine.loader import resolve_entry_point, resolve_units

logger = logging.getLogger(__name__)


def init_modules_configuration(app, db=None):
    """
    Invoke each MODULE_CONFIGS unit as unit(app, db).

    Args:
        app: The Flask application instance.
        db: Database handle passed through unchanged.
    """
    for unit in resolve_units(app.config.get('MODULE_CONFIGS')):
        configure = resolve_entry_point(unit, 'configure')
        configure(app, db)
        logger.debug(f"Applied module configuration {getattr(configure, '__module__', configure)}")
