# engine/loader.py

"""
Server Unit Loader

Resolves the entries of MODULE_CONFIGS, POLICY_MODULES and ROUTE_MODULES.
An entry is either an object (callable or module) registered directly, or an
import string in the form "package.module" or "package.module:attribute".
Import failures are not caught: a unit that cannot be loaded aborts startup.
"""

import logging

from werkzeug.utils import import_string

logger = logging.getLogger(__name__)


def resolve_unit(entry):
    """
    Resolve a configured server unit.

    Args:
        entry: An import string or an already-loaded object.

    Returns:
        The loaded module, function or object.

    Raises:
        werkzeug.utils.ImportStringError: If the import string cannot be resolved.
    """
    if not isinstance(entry, str):
        return entry

    unit = import_string(entry)
    logger.debug(f"Resolved server unit {entry}")
    return unit


def resolve_units(entries):
    """Resolve every entry, keeping configuration order."""
    return [resolve_unit(entry) for entry in entries or ()]


def resolve_entry_point(unit, name):
    """
    Find the callable a unit exposes.

    A unit that is itself callable (a function or class) is returned unchanged;
    a module must expose ``name``.

    Raises:
        RuntimeError: If the unit has no usable entry point.
    """
    if callable(unit):
        return unit

    entry_point = getattr(unit, name, None)
    if not callable(entry_point):
        raise RuntimeError(
            f"{getattr(unit, '__name__', unit)!r} does not define a callable '{name}'"
        )
    return entry_point
