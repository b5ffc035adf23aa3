# engine/init/cli.py

"""
CLI Commands Registration

Register CLI commands for inspecting how the application was initialized.
"""

import logging

import click
from flask import current_app
from flask.cli import AppGroup

logger = logging.getLogger(__name__)

engine_cli = AppGroup('engine', help='Inspect application initialization.')


@engine_cli.command('steps')
def list_steps():
    """List initialization steps and whether each one ran."""
    from engine.init.steps import STEPS

    completed = current_app.extensions.get('engine.steps', [])
    for name, flag in STEPS:
        state = 'on' if name in completed else 'off'
        click.echo(f"{name:<18} {flag:<24} {state}")


@engine_cli.command('policies')
def list_policies():
    """Print the registered access-control rules."""
    from engine.policy import acl

    rules = acl.rules()
    if not rules:
        click.echo('No policies registered.')
        return
    for role, resource, permissions in rules:
        click.echo(f"{role:<12} {resource:<32} {', '.join(permissions)}")


def init_cli_commands(app):
    """
    Register CLI commands with the Flask application.

    Args:
        app: The Flask application instance.
    """
    app.cli.add_command(engine_cli)
