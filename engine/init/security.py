# engine/init/security.py

"""
Security Headers

Add framing, XSS, sniffing, download and transport security headers to all
responses, and drop the framework identification header.
"""

import logging

logger = logging.getLogger(__name__)

SIX_MONTHS_MS = 15778476000

SECURITY_HEADERS = {
    'X-Frame-Options': 'SAMEORIGIN',
    'X-XSS-Protection': '1; mode=block',
    'X-Content-Type-Options': 'nosniff',
    'X-Download-Options': 'noopen',
}


def hsts_header(max_age_ms=SIX_MONTHS_MS, include_subdomains=True):
    """Build the Strict-Transport-Security value from a max-age in milliseconds."""
    value = f"max-age={round(max_age_ms / 1000)}"
    if include_subdomains:
        value += '; includeSubDomains'
    return value


def init_security_headers(app):
    """
    Add security headers to all responses.

    HSTS is sent on plain HTTP as well as HTTPS.

    Args:
        app: The Flask application instance.
    """
    strict_transport = hsts_header()

    @app.after_request
    def add_security_headers(response):
        response.headers.update(SECURITY_HEADERS)
        response.headers['Strict-Transport-Security'] = strict_transport
        response.headers.pop('X-Powered-By', None)
        return response

    logger.debug("Security headers enabled")
