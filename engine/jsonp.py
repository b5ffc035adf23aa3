# engine/jsonp.py

"""
JSONP Support

Wraps JSON responses in a JavaScript callback when the request names one,
e.g. GET /api/items?callback=render.
"""

import logging
import re

from flask import request

logger = logging.getLogger(__name__)

# Characters allowed in a callback name: word characters, $, . and brackets
_INVALID_CALLBACK_CHARS = re.compile(r'[^\[\]\w$.]')


def sanitize_callback(name):
    """Strip characters that cannot appear in a JavaScript callback reference."""
    return _INVALID_CALLBACK_CHARS.sub('', name or '')


def wrap_jsonp(callback, body):
    """Return the JavaScript payload calling ``callback`` with ``body``."""
    # U+2028 and U+2029 are valid JSON but terminate JavaScript string literals
    body = body.replace('\u2028', '\\u2028').replace('\u2029', '\\u2029')
    return f"/**/ typeof {callback} === 'function' && {callback}({body});"


def init_jsonp(app):
    """
    Enable JSONP callbacks for JSON responses.

    Args:
        app: The Flask application instance.
    """
    app.config['JSONP_CALLBACK_ENABLED'] = True
    param = app.config.get('JSONP_CALLBACK_NAME', 'callback')

    @app.after_request
    def apply_jsonp_callback(response):
        if not app.config.get('JSONP_CALLBACK_ENABLED'):
            return response
        if not response.is_json or response.direct_passthrough:
            return response

        callback = sanitize_callback(request.args.get(param))
        if not callback:
            return response

        body = response.get_data(as_text=True)
        response.set_data(wrap_jsonp(callback, body))
        response.mimetype = 'text/javascript'
        response.headers['X-Content-Type-Options'] = 'nosniff'
        return response
