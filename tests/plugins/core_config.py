"""Core module configuration unit."""
from tests.plugins import calls


def configure(app, db):
    calls.append(('configs', 'core', db))
    app.config['CORE_CONFIGURED'] = True

    @app.before_request
    def tag_request():
        from flask import g
        g.core = True
