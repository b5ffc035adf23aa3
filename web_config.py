"""
Web Configuration Module

This module defines the configuration settings for the engine application,
including site metadata, client asset lists, server module lists, session
cookie settings and the switches that enable each initialization step.
Values are loaded primarily from environment variables.
"""

from datetime import timedelta
import os


def _env_flag(name, default=False):
    """Read a boolean switch such as INIT_SESSION=true from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ('true', '1', 'yes')


def _env_list(name, default=None):
    """Read a comma-separated list from the environment."""
    value = os.getenv(name)
    if not value:
        return list(default or [])
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    """Application configuration settings."""
    # Environment (development, production, anything else)
    ENVIRONMENT = os.getenv('FLASK_ENV')

    # Site metadata shared with templates
    APP_TITLE = os.getenv('APP_TITLE', 'Engine')
    APP_DESCRIPTION = os.getenv('APP_DESCRIPTION', 'Full-stack web application')
    APP_KEYWORDS = os.getenv('APP_KEYWORDS', 'flask, wsgi, web')
    GOOGLE_ANALYTICS_TRACKING_ID = os.getenv('GOOGLE_ANALYTICS_TRACKING_ID')
    FACEBOOK_CLIENT_ID = os.getenv('FACEBOOK_CLIENT_ID')
    LIVERELOAD = _env_flag('LIVERELOAD')
    LOGO = os.getenv('LOGO', 'public/img/brand/logo.png')
    FAVICON = os.getenv('FAVICON', 'public/img/brand/favicon.ico')

    # Client assets
    CLIENT_JS_FILES = _env_list('CLIENT_JS_FILES')
    CLIENT_CSS_FILES = _env_list('CLIENT_CSS_FILES')
    PUBLIC_FOLDER = os.getenv('PUBLIC_FOLDER', 'public')
    CLIENT_FOLDERS = _env_list('CLIENT_FOLDERS')

    # Server modules, as import strings ("package.module:attribute")
    MODULE_CONFIGS = _env_list('MODULE_CONFIGS')
    POLICY_MODULES = _env_list('POLICY_MODULES')
    ROUTE_MODULES = _env_list('ROUTE_MODULES')

    # Views
    TEMPLATE_ENGINE = os.getenv('TEMPLATE_ENGINE', 'jinja2')
    VIEWS_PATH = os.getenv('VIEWS_PATH', './')
    VIEW_EXTENSION = 'server.view.html'

    # Security settings
    SECURE_SSL = _env_flag('SECURE_SSL')
    SECRET_KEY = os.getenv('SECRET_KEY', 'engine-dev-secret-change-me')
    COOKIE_SECRET = os.getenv('COOKIE_SECRET')

    # Session configuration (used when INIT_SESSION is enabled)
    SESSION_TYPE = os.getenv('SESSION_TYPE', 'redis')
    REDIS_URL = os.getenv('REDIS_URL', 'redis://redis:6379/0')
    PERMANENT_SESSION_LIFETIME = timedelta(hours=24)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_NAME = os.getenv('SESSION_KEY', 'sessionId')
    SESSION_COLLECTION = os.getenv('SESSION_COLLECTION', 'sessions')

    # Request handling
    JSONP_CALLBACK_NAME = 'callback'
    METHOD_OVERRIDE_HEADER = 'X-HTTP-Method-Override'
    METHOD_OVERRIDE_METHODS = ['POST']
    ERROR_PAGE_PATH = '/server-error'

    # Initialization steps. Only middleware and error routes run by default.
    INIT_LOCALS = _env_flag('INIT_LOCALS')
    INIT_MIDDLEWARE = _env_flag('INIT_MIDDLEWARE', True)
    INIT_VIEW_ENGINE = _env_flag('INIT_VIEW_ENGINE')
    INIT_SESSION = _env_flag('INIT_SESSION')
    INIT_MODULES = _env_flag('INIT_MODULES')
    INIT_SECURITY_HEADERS = _env_flag('INIT_SECURITY_HEADERS')
    INIT_CLIENT_ROUTES = _env_flag('INIT_CLIENT_ROUTES')
    INIT_POLICIES = _env_flag('INIT_POLICIES')
    INIT_ROUTES = _env_flag('INIT_ROUTES')
    INIT_ERROR_ROUTES = _env_flag('INIT_ERROR_ROUTES', True)


class DevelopmentConfig(Config):
    """Development configuration settings."""
    ENVIRONMENT = 'development'
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration settings."""
    ENVIRONMENT = 'production'
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration settings."""
    TESTING = True
    ENVIRONMENT = 'test'
    SECRET_KEY = 'test-secret-key'
    SESSION_TYPE = 'cachelib'

    # Tests enable steps explicitly
    INIT_LOCALS = False
    INIT_MIDDLEWARE = True
    INIT_VIEW_ENGINE = False
    INIT_SESSION = False
    INIT_MODULES = False
    INIT_SECURITY_HEADERS = False
    INIT_CLIENT_ROUTES = False
    INIT_POLICIES = False
    INIT_ROUTES = False
    INIT_ERROR_ROUTES = True
