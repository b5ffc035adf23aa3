# engine/init/middleware.py

"""
Middleware Configuration

Apply compression, JSONP, development request logging, body parsing, method
override and cookie parsing, in that order.
"""

import logging
import time

from engine.body_parser import init_body_parser
from engine.compression import init_compression
from engine.cookies import init_cookie_parser
from engine.jsonp import init_jsonp
from engine.method_override import MethodOverrideMiddleware

logger = logging.getLogger(__name__)
request_logger = logging.getLogger('engine.request')


class RequestLoggerMiddleware:
    """Middleware logging one line per request in development mode."""

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        started = time.perf_counter()
        captured = {}

        def logging_start_response(status, headers, exc_info=None):
            captured['status'] = status.split(' ', 1)[0]
            return start_response(status, headers, exc_info)

        path = environ.get('PATH_INFO', '')
        if environ.get('QUERY_STRING'):
            path += '?' + environ['QUERY_STRING']

        try:
            return self.app(environ, logging_start_response)
        except Exception as e:
            request_logger.error(f"Error in request: {str(e)}", exc_info=True)
            raise
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            request_logger.info(
                f"{environ.get('REQUEST_METHOD')} {path} "
                f"{captured.get('status', '-')} {elapsed_ms:.3f} ms"
            )


def init_middleware(app):
    """
    Apply all request middleware to the Flask application.

    Args:
        app: The Flask application instance.
    """
    # Showing stack errors
    app.config['SHOW_STACK_ERROR'] = True

    # Should be placed before static file serving
    init_compression(app)

    # Enable jsonp. Registered after compression so the callback wraps the
    # plain JSON body before it is gzipped
    init_jsonp(app)

    # Environment dependent middleware
    environment = app.config.get('ENVIRONMENT')
    if environment == 'development':
        app.wsgi_app = RequestLoggerMiddleware(app.wsgi_app)

        # Disable views cache
        app.config['VIEW_CACHE'] = False
        app.config['TEMPLATES_AUTO_RELOAD'] = True
        logger.info("Development mode enabled with request logging")
    elif environment == 'production':
        app.config['VIEW_CACHE_MODE'] = 'memory'

    # Request body parsing should be registered before anything reading g.body
    init_body_parser(app)
    app.wsgi_app = MethodOverrideMiddleware(
        app.wsgi_app,
        header=app.config.get('METHOD_OVERRIDE_HEADER', 'X-HTTP-Method-Override'),
        methods=app.config.get('METHOD_OVERRIDE_METHODS', ['POST']),
    )

    init_cookie_parser(app)
