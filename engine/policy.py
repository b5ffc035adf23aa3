# engine/policy.py

"""
Access Control Policies

Process-wide registry of role permissions. Policy modules fill it at startup
from their ``invoke_roles_policies()`` function:

    from engine.policy import acl

    def invoke_roles_policies():
        acl.allow(['admin'], ['/api/articles', '/api/articles/<int:article_id>'], '*')
        acl.allow(['user', 'guest'], '/api/articles', ['get'])

Views are then guarded with ``policy_required``, which checks the request's
url rule and lowercased method against the roles of the current user.
"""

import logging
from functools import wraps

from flask import abort, g, request

logger = logging.getLogger(__name__)

ANY_PERMISSION = '*'
GUEST_ROLE = 'guest'


def _as_list(value):
    if isinstance(value, str):
        return [value]
    return list(value)


class Acl:
    """Role -> resource -> permissions registry."""

    def __init__(self):
        self._rules = {}

    def allow(self, roles, resources, permissions):
        """Grant ``permissions`` on ``resources`` to every role in ``roles``."""
        for role in _as_list(roles):
            for resource in _as_list(resources):
                granted = self._rules.setdefault((role, resource), set())
                granted.update(permission.lower() for permission in _as_list(permissions))

    def is_allowed(self, roles, resource, permission):
        """Return True if any of ``roles`` holds ``permission`` on ``resource``."""
        permission = permission.lower()
        for role in _as_list(roles):
            granted = self._rules.get((role, resource), ())
            if ANY_PERMISSION in granted or permission in granted:
                return True
        return False

    def rules(self):
        """All rules as sorted (role, resource, permissions) tuples."""
        return [
            (role, resource, tuple(sorted(permissions)))
            for (role, resource), permissions in sorted(self._rules.items())
        ]

    def clear(self):
        self._rules.clear()


acl = Acl()


def current_roles():
    """Roles of the current request, falling back to guest."""
    return g.get('roles') or [GUEST_ROLE]


def policy_required(view=None, *, registry=None, roles_loader=current_roles):
    """
    Decorator rejecting requests whose roles lack permission (403).

    The resource is the matched url rule (e.g. ``/api/articles/<int:article_id>``)
    and the permission is the lowercased HTTP method.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            rules = registry or acl
            resource = request.url_rule.rule if request.url_rule else request.path
            roles = roles_loader()
            if not rules.is_allowed(roles, resource, request.method):
                logger.warning(f"Denied {request.method} {resource} for roles {roles}")
                abort(403)
            return func(*args, **kwargs)
        return wrapper

    if view is not None:
        return decorator(view)
    return decorator
