# engine/init/locals.py

"""
Application Locals

Site-wide values shared with every template (title, analytics id, asset
lists) plus per-request host and url derived from the incoming request.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from flask import g, request
from werkzeug.urls import iri_to_uri

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppLocals:
    """Read-only values built from config once at startup."""
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    googleAnalyticsTrackingID: Optional[str] = None
    facebookAppId: Optional[str] = None
    jsFiles: List[str] = field(default_factory=list)
    cssFiles: List[str] = field(default_factory=list)
    livereload: Optional[bool] = None
    logo: Optional[str] = None
    favicon: Optional[str] = None
    secure: Optional[bool] = None

    @classmethod
    def from_config(cls, config):
        # Only an explicit True turns the secure flag on
        secure = True if config.get('SECURE_SSL') is True else None
        return cls(
            title=config.get('APP_TITLE'),
            description=config.get('APP_DESCRIPTION'),
            keywords=config.get('APP_KEYWORDS'),
            googleAnalyticsTrackingID=config.get('GOOGLE_ANALYTICS_TRACKING_ID'),
            facebookAppId=config.get('FACEBOOK_CLIENT_ID'),
            jsFiles=list(config.get('CLIENT_JS_FILES') or []),
            cssFiles=list(config.get('CLIENT_CSS_FILES') or []),
            livereload=config.get('LIVERELOAD'),
            logo=config.get('LOGO'),
            favicon=config.get('FAVICON'),
            secure=secure,
        )

    def as_dict(self):
        """Template variables, leaving out unset optional flags."""
        values = dict(self.__dict__)
        if values['secure'] is None:
            values.pop('secure')
        return values


def strip_port(host):
    """Return the host name without its port ('[::1]:5000' -> '[::1]')."""
    if host.startswith('['):
        end = host.find(']')
        return host[:end + 1] if end != -1 else host
    return host.split(':', 1)[0]


def original_url(req):
    """
    The request target as the client sent it, still percent-encoded.

    Servers expose it as RAW_URI or REQUEST_URI. Without either, the decoded
    path is re-encoded, which cannot tell an encoded '/' from a literal one.
    """
    raw_uri = req.environ.get('RAW_URI') or req.environ.get('REQUEST_URI')
    if raw_uri:
        return raw_uri

    url = iri_to_uri(req.script_root + req.path)
    if req.query_string:
        url += '?' + req.query_string.decode('latin-1')
    return url


def build_request_locals(req):
    """
    Compute the per-request host and url values.

    Returns:
        tuple: (host, url) where host is scheme://hostname and url is
        scheme://Host-header + original request target.
    """
    host_header = req.headers.get('Host', req.host)

    host = f"{req.scheme}://{strip_port(req.host)}"
    url = f"{req.scheme}://{host_header}{original_url(req)}"
    return host, url


def init_local_variables(app):
    """
    Build the shared application locals and the per-request url hook.

    Args:
        app: The Flask application instance.
    """
    app_locals = AppLocals.from_config(app.config)
    app.extensions['locals'] = app_locals

    @app.before_request
    def set_request_locals():
        g.host, g.url = build_request_locals(request)

    @app.context_processor
    def inject_locals():
        context = app_locals.as_dict()
        context['host'] = g.get('host')
        context['url'] = g.get('url')
        # Only set once a cache mode is configured (production)
        cache = app.config.get('VIEW_CACHE_MODE')
        if cache is not None:
            context['cache'] = cache
        return context

    logger.debug(f"Application locals initialized for '{app_locals.title}'")
