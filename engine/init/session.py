# engine/init/session.py

"""
Session Configuration

Configure server-side sessions with Flask-Session. The step only runs when
INIT_SESSION is enabled; otherwise Flask's signed-cookie session is used.
"""

import logging

from flask_session import Session

logger = logging.getLogger(__name__)


def build_session_settings(config):
    """
    Derive Flask-Session settings from the application config.

    The secure cookie attribute requires both SESSION_COOKIE_SECURE and SSL.
    """
    session_type = config.get('SESSION_TYPE', 'redis')
    collection = config.get('SESSION_COLLECTION', 'sessions')

    settings = {
        'SESSION_TYPE': session_type,
        'SESSION_PERMANENT': True,
        'SESSION_COOKIE_HTTPONLY': bool(config.get('SESSION_COOKIE_HTTPONLY')),
        'SESSION_COOKIE_SECURE': bool(
            config.get('SESSION_COOKIE_SECURE') and config.get('SECURE_SSL')
        ),
    }

    if session_type == 'mongodb':
        settings['SESSION_MONGODB_COLLECT'] = collection
    else:
        settings['SESSION_KEY_PREFIX'] = f'{collection}:'

    if session_type == 'redis':
        from redis import Redis
        settings['SESSION_REDIS'] = Redis.from_url(config.get('REDIS_URL'))

    return settings


def init_session(app):
    """
    Configure session management.

    Args:
        app: The Flask application instance.
    """
    app.config.update(build_session_settings(app.config))
    Session(app)
    logger.info(
        f"Session store initialized: type={app.config['SESSION_TYPE']}, "
        f"cookie={app.config.get('SESSION_COOKIE_NAME')}"
    )
