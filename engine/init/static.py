# engine/init/static.py

"""
Static Client Routes

Serve the public folder at ``/`` and every CLIENT_FOLDERS entry at its own
path (``modules/core/client`` is served at ``/modules/core/client``). Mounts
are tried in registration order; a missing file falls through to routing.
"""

import logging
import os

from flask import request, send_from_directory
from werkzeug.security import safe_join

logger = logging.getLogger(__name__)

INDEX_FILE = 'index.html'


def build_mounts(config, root=None):
    """
    Return the ordered (url prefix, directory) mounts.

    Args:
        config: The application config.
        root: Base directory, defaults to the working directory.
    """
    root = root or os.getcwd()
    mounts = [('/', os.path.join(root, config.get('PUBLIC_FOLDER') or 'public'))]
    for folder in config.get('CLIENT_FOLDERS') or []:
        folder = folder.strip('/')
        mounts.append((f'/{folder}', os.path.join(root, folder)))
    return mounts


def _relative_path(path, prefix):
    """Path below ``prefix``, or None when the request is outside the mount."""
    if prefix == '/':
        return path.lstrip('/')
    if path == prefix:
        return ''
    if path.startswith(prefix + '/'):
        return path[len(prefix) + 1:]
    return None


def find_static_file(mounts, path):
    """
    Locate the file for a request path.

    Returns:
        tuple: (directory, relative filename) of the first match, or None.
    """
    for prefix, directory in mounts:
        relative = _relative_path(path, prefix)
        if relative is None:
            continue
        if relative == '' or relative.endswith('/'):
            relative += INDEX_FILE

        filename = safe_join(directory, relative)
        if filename is not None and os.path.isfile(filename):
            return directory, relative
    return None


def init_client_routes(app):
    """
    Register static file serving for the public and client folders.

    Args:
        app: The Flask application instance.
    """
    mounts = build_mounts(app.config)
    app.extensions['static_mounts'] = mounts

    @app.before_request
    def serve_client_file():
        if request.method not in ('GET', 'HEAD'):
            return None

        match = find_static_file(mounts, request.path)
        if match is None:
            return None

        directory, relative = match
        return send_from_directory(directory, relative)

    logger.info(f"Static mounts: {', '.join(prefix for prefix, _ in mounts)}")
