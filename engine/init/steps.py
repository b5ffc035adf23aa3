# engine/init/steps.py

"""
Initialization Steps

The fixed order of initialization steps and the config flag gating each one.
"""

import logging

logger = logging.getLogger(__name__)

# Step name -> config flag, in the order create_app runs them
STEPS = (
    ('locals', 'INIT_LOCALS'),
    ('middleware', 'INIT_MIDDLEWARE'),
    ('view_engine', 'INIT_VIEW_ENGINE'),
    ('session', 'INIT_SESSION'),
    ('modules', 'INIT_MODULES'),
    ('security_headers', 'INIT_SECURITY_HEADERS'),
    ('client_routes', 'INIT_CLIENT_ROUTES'),
    ('policies', 'INIT_POLICIES'),
    ('routes', 'INIT_ROUTES'),
    ('error_routes', 'INIT_ERROR_ROUTES'),
)
STEP_FLAGS = dict(STEPS)


def run_step(app, name, initializer, *args):
    """
    Run one initialization step if its flag is enabled.

    Args:
        app: The Flask application instance.
        name: Step name from STEPS.
        initializer: The init function, called as initializer(app, *args).

    Returns:
        bool: True if the step ran.
    """
    flag = STEP_FLAGS[name]
    if not app.config.get(flag):
        logger.debug(f"Skipping {name} initialization ({flag} is off)")
        return False

    initializer(app, *args)
    app.extensions.setdefault('engine.steps', []).append(name)
    return True
