# engine/__init__.py

"""
Flask Application Factory

This module provides the create_app function to initialize and configure the
Flask application. Each initialization step lives in its own module of the
engine/init/ package and is switched on or off by an INIT_* config flag.

With the default configuration only middleware and error routes run; the
remaining steps stay off until their flag is set (e.g. INIT_ROUTES=true).
"""

import logging
from flask import Flask

logger = logging.getLogger(__name__)


def create_app(config_object='web_config.Config', db=None):
    """
    Application factory function for creating a Flask app instance.

    Loads configuration from the specified config object, sets up logging,
    runs every enabled initialization step in its fixed order and registers
    CLI commands.

    Args:
        config_object: The configuration object to load (default is 'web_config.Config').
        db: Database handle handed to module configuration units as-is.

    Returns:
        A configured Flask application instance.
    """
    # Static files are served by the client routes step, not Flask's default rule
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_object)

    # SECRET_KEY is mandatory
    if not app.config.get('SECRET_KEY'):
        raise RuntimeError('SECRET_KEY must be set')

    # Import initialization modules
    from engine.init import (
        init_logging,
        init_local_variables,
        init_middleware,
        init_view_engine,
        init_session,
        init_modules_configuration,
        init_security_headers,
        init_client_routes,
        init_server_policies,
        init_server_routes,
        init_error_routes,
        init_cli_commands,
        run_step,
    )

    # Phase 1: Core setup
    init_logging(app)
    app.extensions['engine.steps'] = []

    # Phase 2: Shared locals and request middleware
    run_step(app, 'locals', init_local_variables)
    run_step(app, 'middleware', init_middleware)

    # Phase 3: Views and sessions
    run_step(app, 'view_engine', init_view_engine)
    run_step(app, 'session', init_session)

    # Phase 4: Module configuration and security
    run_step(app, 'modules', init_modules_configuration, db)
    run_step(app, 'security_headers', init_security_headers)

    # Phase 5: Static files, policies and routes
    run_step(app, 'client_routes', init_client_routes)
    run_step(app, 'policies', init_server_policies)
    run_step(app, 'routes', init_server_routes)

    # Phase 6: Error handling (must come last)
    run_step(app, 'error_routes', init_error_routes)

    # Phase 7: CLI
    init_cli_commands(app)

    logger.info(f"Engine initialized with steps: {', '.join(app.extensions['engine.steps'])}")
    return app


__all__ = ['create_app']
