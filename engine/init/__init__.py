# engine/init/__init__.py

"""
Application Initialization Package

This package contains modular initialization functions for the Flask application.
Each module handles a specific aspect of application setup.
"""

from engine.init.steps import STEPS, STEP_FLAGS, run_step
from engine.init.logging import init_logging
from engine.init.locals import init_local_variables
from engine.init.middleware import init_middleware
from engine.init.view_engine import init_view_engine
from engine.init.session import init_session
from engine.init.modules import init_modules_configuration
from engine.init.security import init_security_headers
from engine.init.static import init_client_routes
from engine.init.policies import init_server_policies
from engine.init.routes import init_server_routes
from engine.init.error_handlers import init_error_routes
from engine.init.cli import init_cli_commands

__all__ = [
    'STEPS',
    'STEP_FLAGS',
    'run_step',
    'init_logging',
    'init_local_variables',
    'init_middleware',
    'init_view_engine',
    'init_session',
    'init_modules_configuration',
    'init_security_headers',
    'init_client_routes',
    'init_server_policies',
    'init_server_routes',
    'init_error_routes',
    'init_cli_commands',
]
