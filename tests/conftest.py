"""
Pytest configuration and shared fixtures for all tests.
"""
import os
import sys
import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from engine import create_app
from engine.policy import acl
from web_config import TestingConfig


def build_config(**overrides):
    """Create a TestingConfig subclass with the given settings."""
    return type('OverrideConfig', (TestingConfig,), overrides)


def find_wsgi_middleware(app, middleware_class):
    """Walk the app.wsgi_app chain and return the first instance of middleware_class."""
    layer = app.wsgi_app
    while layer is not None:
        if isinstance(layer, middleware_class):
            return layer
        layer = getattr(layer, 'app', None)
    return None


@pytest.fixture
def make_app():
    """Factory fixture: make_app(INIT_ROUTES=True, ROUTE_MODULES=[...])."""
    def _make_app(db=None, **overrides):
        return create_app(build_config(**overrides), db=db)
    return _make_app


@pytest.fixture
def app(make_app):
    """Create application with the default steps (middleware + error routes)."""
    return make_app()


@pytest.fixture
def client(app):
    """Create Flask test client."""
    return app.test_client()


@pytest.fixture(autouse=True)
def reset_acl():
    """Policy registrations are process-wide; isolate each test."""
    acl.clear()
    yield
    acl.clear()


@pytest.fixture
def client_tree(tmp_path, monkeypatch):
    """
    Working directory with a public folder and two module client folders.

        public/index.html, public/robots.txt
        modules/users/client/users.js
        modules/core/client/core.css, modules/core/client/robots.txt
    """
    files = {
        'public/index.html': '<h1>home</h1>',
        'public/robots.txt': 'User-agent: *',
        'modules/users/client/users.js': 'console.log("users");',
        'modules/core/client/core.css': 'body { margin: 0; }',
        'modules/core/client/robots.txt': 'core robots',
    }
    for relative, content in files.items():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)

    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_plugin_calls():
    """Clear the call log kept by the units in tests/plugins."""
    from tests.plugins import calls
    calls.clear()
    yield
    calls.clear()
