# engine/log_config/logging_config.py

"""
Logging configuration for the application.

This configuration is used to initialize Python's logging module with a
dictionary-based setup. Request logs, server errors and startup messages each
get their own rotating file under logs/ so one noisy stream cannot bury the
others.
"""

import copy

LOG_DIR = 'logs'

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,

    # Formatters define the layout of the log messages.
    'formatters': {
        'detailed': {
            'format': '%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s'
        },
        'simple': {
            'format': '%(asctime)s [%(levelname)s] %(message)s'
        },
        'focused': {
            'format': '%(asctime)s [%(levelname)s] %(name)s - %(message)s'
        }
    },

    # Handlers specify where log messages are sent (e.g., console, files).
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
            'level': 'INFO',
        },
        'requests_file': {
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': f'{LOG_DIR}/requests.log',
            'formatter': 'focused',
            'level': 'INFO',
            'maxBytes': 26214400,   # 25MB
            'backupCount': 2,
            'encoding': 'utf-8'
        },
        'errors_file': {
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': f'{LOG_DIR}/errors.log',
            'formatter': 'detailed',
            'level': 'WARNING',
            'maxBytes': 26214400,   # 25MB
            'backupCount': 3,
            'encoding': 'utf-8'
        }
    },

    # Loggers define logging behavior for specific modules or components.
    'loggers': {
        'engine': {
            'handlers': ['console', 'errors_file'],
            'level': 'INFO',
            'propagate': False
        },
        'engine.request': {
            'handlers': ['console', 'requests_file'],
            'level': 'INFO',        # Development request log
            'propagate': False
        },
        'engine.init.error_handlers': {
            'handlers': ['console', 'errors_file'],
            'level': 'ERROR',       # Server errors with stack traces
            'propagate': False
        },
        'werkzeug': {
            'handlers': ['requests_file'],
            'level': 'ERROR',       # Only HTTP errors
            'propagate': False
        }
    },

    # The root logger catches all messages not handled by other loggers.
    'root': {
        'handlers': ['console', 'errors_file'],
        'level': 'WARNING',
    }
}


def build_logging_config(environment=None):
    """
    Return a copy of LOGGING_CONFIG levelled for ``environment``.

    The request log is only written in development; elsewhere the
    ``engine.request`` logger keeps warnings and errors only.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    if environment != 'development':
        config['loggers']['engine.request']['level'] = 'WARNING'
    if environment == 'production':
        config['handlers']['console']['level'] = 'WARNING'
    return config
