# engine/cookies.py

"""
Cookie Parsing

Exposes request cookies as ``g.cookies``. When COOKIE_SECRET is configured,
cookies written with ``sign_cookie`` (values prefixed with ``s:``) are
verified with itsdangerous and the valid ones exposed as
``g.signed_cookies``; tampered values are dropped.
"""

import logging

from flask import g, request
from itsdangerous import BadSignature, Signer

logger = logging.getLogger(__name__)

SIGNED_PREFIX = 's:'
COOKIE_SALT = 'engine.cookies'


def _signer(secret):
    return Signer(secret, salt=COOKIE_SALT)


def sign_cookie(value, secret):
    """Return the signed representation of a cookie value."""
    return SIGNED_PREFIX + _signer(secret).sign(value).decode('utf-8')


def unsign_cookie(value, secret):
    """
    Verify a signed cookie value.

    Returns:
        The original value, or None if the value is unsigned or tampered with.
    """
    if not value or not value.startswith(SIGNED_PREFIX):
        return None
    try:
        return _signer(secret).unsign(value[len(SIGNED_PREFIX):]).decode('utf-8')
    except BadSignature:
        return None


def split_cookies(cookies, secret):
    """
    Separate plain cookies from verified signed cookies.

    Returns:
        tuple: (plain, signed) dicts.
    """
    if not secret:
        return dict(cookies), {}

    plain, signed = {}, {}
    for name, value in cookies.items():
        if value.startswith(SIGNED_PREFIX):
            unsigned = unsign_cookie(value, secret)
            if unsigned is None:
                logger.warning(f"Dropping cookie with invalid signature: {name}")
                continue
            signed[name] = unsigned
        else:
            plain[name] = value
    return plain, signed


def init_cookie_parser(app):
    """
    Register the cookie parsing hook.

    Args:
        app: The Flask application instance.
    """

    @app.before_request
    def parse_cookies():
        g.cookies, g.signed_cookies = split_cookies(
            request.cookies, app.config.get('COOKIE_SECRET')
        )
