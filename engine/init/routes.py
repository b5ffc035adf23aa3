# engine/init/routes.py

"""
Server Routes

Give each configured route module its own blueprint and mount it at the root.
"""

import logging

from flask import Blueprint

from engine.loader import resolve_entry_point, resolve_units

logger = logging.getLogger(__name__)


def _blueprint_name(unit, index):
    module_name = getattr(unit, '__module__', None) or getattr(unit, '__name__', 'routes')
    return f"{module_name.rsplit('.', 1)[-1]}_{index}"


def init_server_routes(app):
    """
    Register one blueprint per ROUTE_MODULES unit, in configuration order.

    Each unit is called as unit(blueprint). Flask only records routes added
    before registration, so the unit runs before the blueprint is mounted.

    Args:
        app: The Flask application instance.
    """
    for index, unit in enumerate(resolve_units(app.config.get('ROUTE_MODULES'))):
        register_routes = resolve_entry_point(unit, 'register_routes')
        blueprint = Blueprint(_blueprint_name(register_routes, index), __name__)
        register_routes(blueprint)
        app.register_blueprint(blueprint, url_prefix='/')
        logger.debug(f"Registered routes blueprint {blueprint.name}")
