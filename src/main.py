"""
Command-line entry point.

Runs one action of a provisioning plugin on a JSON payload and prints the
output payload, e.g.::

    redis-provisioner redis create payload.json
"""

import json
import logging
import sys

import click

from config import get_config
from plugins.actions.base import run_action
from plugins.errors import PluginError
from plugins.registry import get_registry, register_builtin_plugins

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.argument("plugin")
@click.argument("action")
@click.argument("payload", type=click.File("r"), default="-")
@click.option("--log-level", default=None, help="Override LOG_LEVEL")
def cli(plugin, action, payload, log_level):
    """Run ACTION of PLUGIN on the JSON PAYLOAD file (default: stdin)."""
    config = get_config()
    setup_logging(log_level or config.logging.log_level)

    registry = get_registry()
    if not registry.list_plugins():
        register_builtin_plugins(config.plugins.enabled_plugins)

    try:
        target = registry.get_action(plugin, action)
        result = run_action(target, payload.read())
    except PluginError as e:
        logger.error(f"{plugin}/{action} failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps(result.to_payload()))


if __name__ == "__main__":
    cli()
