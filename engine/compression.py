# engine/compression.py

"""
Response Compression

Gzip compression for HTTP responses (Flask-Compress), restricted to textual
content types: anything whose Content-Type mentions json, text, javascript,
css, font or svg.
"""

import logging
import re

from flask_compress import Compress

logger = logging.getLogger(__name__)

COMPRESSIBLE_TYPES = re.compile(r'json|text|javascript|css|font|svg', re.IGNORECASE)
COMPRESSION_LEVEL = 9


def is_compressible(content_type):
    """Return True if a response with this Content-Type should be compressed."""
    return bool(COMPRESSIBLE_TYPES.search(content_type or ''))


class CompressibleMimetypes:
    """
    Stand-in for the COMPRESS_MIMETYPES list.

    Membership is answered with the content-type pattern instead of a fixed
    list of mimetypes.
    """

    def __contains__(self, mimetype):
        return is_compressible(mimetype)

    def __iter__(self):
        # Nothing to enumerate; the pattern matches an open-ended set
        return iter(())

    def __repr__(self):
        return f"<CompressibleMimetypes {COMPRESSIBLE_TYPES.pattern!r}>"


class PatternCompress(Compress):
    """Flask-Compress extension checking mimetypes against COMPRESSIBLE_TYPES."""

    def init_app(self, app):
        super().init_app(app)
        # Recent releases copy COMPRESS_MIMETYPES into a set here and consult
        # only that set when compressing
        self.compress_mimetypes_set = app.config['COMPRESS_MIMETYPES']


def init_compression(app):
    """
    Initialize response compression.

    Args:
        app: Flask application instance

    Returns:
        The Compress extension instance.
    """
    app.config['COMPRESS_MIMETYPES'] = CompressibleMimetypes()
    app.config['COMPRESS_LEVEL'] = COMPRESSION_LEVEL
    app.config.setdefault('COMPRESS_ALGORITHM', 'gzip')

    compress = PatternCompress(app)
    logger.info(f"[Compression] Initialized: gzip level {COMPRESSION_LEVEL}")
    return compress
