# engine/init/view_engine.py

"""
View Engine Configuration

Select the template engine by name and point it at the views root. Views are
named after their path without the ``.server.view.html`` extension, e.g.
``render_view('modules/core/views/index')``.
"""

import logging
import os

from flask import current_app, render_template
from jinja2 import FileSystemLoader

logger = logging.getLogger(__name__)


def _render_jinja(template_name, context):
    return render_template(template_name, **context)


# Template engine adapters by configured name
ENGINES = {
    'jinja': _render_jinja,
    'jinja2': _render_jinja,
}


def init_view_engine(app):
    """
    Configure the view engine and views directory.

    An unknown TEMPLATE_ENGINE is not an error here; it fails on first render.

    Args:
        app: The Flask application instance.
    """
    engine_name = app.config.get('TEMPLATE_ENGINE')
    views_path = os.path.abspath(app.config.get('VIEWS_PATH') or './')

    app.jinja_loader = FileSystemLoader(views_path)
    app.config['VIEW_ENGINE'] = app.config.get('VIEW_EXTENSION', 'server.view.html')
    app.config['VIEWS'] = views_path

    app.extensions['view_engine'] = {
        'name': engine_name,
        'render': ENGINES.get(engine_name),
    }

    if engine_name not in ENGINES:
        logger.warning(f"Template engine '{engine_name}' is not available; rendering will fail")


def render_view(view_name, /, **context):
    """
    Render a view from the views root.

    Args:
        view_name: View path without extension.
        **context: Template variables.

    Raises:
        RuntimeError: If the view engine is not configured or unavailable.
    """
    view_engine = current_app.extensions.get('view_engine')
    if view_engine is None:
        raise RuntimeError('View engine has not been initialized')
    if view_engine['render'] is None:
        raise RuntimeError(f"Template engine '{view_engine['name']}' is not available")

    template_name = f"{view_name}.{current_app.config['VIEW_ENGINE']}"
    return view_engine['render'](template_name, context)
