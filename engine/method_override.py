# engine/method_override.py

"""
HTTP Method Override

WSGI middleware letting clients that can only send POST (HTML forms, old
proxies) ask for PUT, PATCH or DELETE through the X-HTTP-Method-Override
header.
"""

import logging

logger = logging.getLogger(__name__)

ALLOWED_METHODS = frozenset([
    'GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS',
])

ORIGINAL_METHOD_KEY = 'engine.original_method'


class MethodOverrideMiddleware:
    """Rewrite REQUEST_METHOD from an override header."""

    def __init__(self, app, header='X-HTTP-Method-Override', methods=('POST',)):
        self.app = app
        self.environ_key = 'HTTP_' + header.upper().replace('-', '_')
        self.methods = frozenset(method.upper() for method in methods)

    def __call__(self, environ, start_response):
        method = environ.get('REQUEST_METHOD', '').upper()
        override = environ.get(self.environ_key, '').strip().upper()

        if method in self.methods and override in ALLOWED_METHODS:
            environ[ORIGINAL_METHOD_KEY] = method
            environ['REQUEST_METHOD'] = override
            logger.debug(f"Method override: {method} -> {override} {environ.get('PATH_INFO')}")

        return self.app(environ, start_response)
