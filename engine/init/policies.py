# engine/init/policies.py

"""
Server Policies

Load every configured policy module and let it register its role rules.
"""

import logging

from engine.loader import resolve_entry_point, resolve_units

logger = logging.getLogger(__name__)


def init_server_policies(app):
    """
    Call invoke_roles_policies() on each POLICY_MODULES unit.

    Args:
        app: The Flask application instance.
    """
    for unit in resolve_units(app.config.get('POLICY_MODULES')):
        invoke_roles_policies = resolve_entry_point(unit, 'invoke_roles_policies')
        invoke_roles_policies()
        logger.debug(f"Registered policies from {getattr(unit, '__name__', unit)}")
