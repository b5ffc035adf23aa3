# engine/init/error_handlers.py

"""
Error Handlers

Log unexpected exceptions and send the browser to the server error page.
"""

import logging

from flask import current_app, redirect, request
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


def is_routing_error(error):
    """True for the 404/405 (or redirect) raised when no route matched."""
    return isinstance(error, HTTPException) and error is request.routing_exception


def redirect_to_error_page(error):
    """
    Handle an error raised while processing a request.

    Returns:
        None when there is no error, the routing exception itself when no
        route matched, or a redirect to ERROR_PAGE_PATH for anything else,
        HTTP errors raised by hooks and views included.
    """
    # If the error object doesn't exist
    if not error:
        return None

    if is_routing_error(error):
        return error

    # Log it
    logger.error(f"Unhandled Exception: {error}", exc_info=error)

    # Redirect to error page
    return redirect(current_app.config.get('ERROR_PAGE_PATH', '/server-error'))


def init_error_routes(app):
    """
    Install the application's error handler.

    Args:
        app: The Flask application instance.
    """
    app.register_error_handler(Exception, redirect_to_error_page)
