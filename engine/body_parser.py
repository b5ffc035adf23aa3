# engine/body_parser.py

"""
Request Body Parsing

Parses url-encoded and JSON request bodies into ``g.body`` before any view
runs. Url-encoded keys use the extended bracket syntax:

    user[name]=ada&user[langs][]=py&user[langs][]=c
    -> {'user': {'name': 'ada', 'langs': ['py', 'c']}}
"""

import logging
import re

from flask import g, request

logger = logging.getLogger(__name__)

URLENCODED = 'application/x-www-form-urlencoded'

_KEY_PART = re.compile(r'\[([^\[\]]*)\]')


def split_key(key):
    """
    Split ``a[b][]`` into ``['a', 'b', '']``.

    Keys without brackets, or with a malformed bracket suffix, are kept whole.
    """
    bracket = key.find('[')
    if bracket <= 0:
        return [key]

    head, rest = key[:bracket], key[bracket:]
    parts = _KEY_PART.findall(rest)
    if ''.join(f'[{part}]' for part in parts) != rest:
        return [key]
    return [head] + parts


def _assign(container, parts, value):
    head, rest = parts[0], parts[1:]

    if not rest:
        if head not in container:
            container[head] = value
        elif isinstance(container[head], list):
            container[head].append(value)
        else:
            # Repeated plain keys collect into a list
            container[head] = [container[head], value]
        return

    if rest[0] == '':
        items = container.get(head)
        if not isinstance(items, list):
            items = [] if items is None else [items]
            container[head] = items
        if len(rest) == 1:
            items.append(value)
        else:
            child = {}
            items.append(child)
            _assign(child, rest[1:], value)
        return

    child = container.get(head)
    if not isinstance(child, dict):
        child = {}
        container[head] = child
    _assign(child, rest, value)


def parse_nested_form(pairs):
    """
    Build a nested dict from (key, value) pairs using bracket syntax.

    Args:
        pairs: Iterable of (key, value), in submission order.

    Returns:
        dict: The nested body.
    """
    body = {}
    for key, value in pairs:
        _assign(body, split_key(key), value)
    return body


def parse_request_body():
    """Parse the current request body according to its Content-Type."""
    if request.mimetype == URLENCODED:
        return parse_nested_form(request.form.items(multi=True))

    if request.is_json:
        if not request.get_data(cache=True):
            return {}
        # Malformed JSON raises 400 Bad Request
        return request.get_json()

    return {}


def init_body_parser(app):
    """
    Register the body parsing hook.

    Args:
        app: The Flask application instance.
    """

    @app.before_request
    def parse_body():
        g.body = parse_request_body()
