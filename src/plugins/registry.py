"""
Plugin Registry - Registration and lookup of resource plugins.

This module provides the process-wide registry the orchestrator uses to
reach any action: plugin name -> plugin facade -> action.
"""

from typing import Any, Dict, Optional

from plugins.actions.base import Action
from plugins.base import logger
from plugins.errors import PluginNotFoundError


class PluginRegistry:
    """
    Central registry for resource plugins.

    A plugin is any object with ``name``, ``version`` and
    ``get_action_by_name()``. Plugins are registered once at startup and
    only looked up afterwards.
    """

    def __init__(self):
        # Registered plugin facades
        self._plugins: Dict[str, Any] = {}

    # Registration methods

    def register_plugin(self, plugin: Any) -> None:
        """
        Register a plugin facade.

        Args:
            plugin: The plugin instance to register
        """
        name = plugin.name
        version = plugin.version

        if name in self._plugins:
            logger.warning(f"Overwriting existing plugin: {name}")

        self._plugins[name] = plugin
        logger.info(
            f"Registered plugin: {name} v{version} "
            f"(actions: {', '.join(plugin.list_actions())})"
        )

    # Lookup methods

    def get_plugin(self, name: str) -> Any:
        """
        Get a registered plugin.

        Args:
            name: The plugin name to retrieve

        Returns:
            The plugin facade

        Raises:
            PluginNotFoundError: If the plugin name is not registered
        """
        if name not in self._plugins:
            raise PluginNotFoundError(name, self.list_plugins())
        return self._plugins[name]

    def get_action(self, plugin_name: str, action_name: str) -> Action:
        """
        Resolve an action on a registered plugin.

        Raises:
            PluginNotFoundError: If the plugin name is not registered
            ActionNotFoundError: If the plugin has no such action
        """
        return self.get_plugin(plugin_name).get_action_by_name(action_name)

    # Discovery methods

    def list_plugins(self) -> list[str]:
        """List all registered plugin names."""
        return list(self._plugins.keys())


# Global registry instance
_registry: Optional[PluginRegistry] = None


def get_registry() -> PluginRegistry:
    """Get the global plugin registry singleton."""
    global _registry
    if _registry is None:
        _registry = PluginRegistry()
    return _registry


def reset_registry() -> None:
    """Reset the global registry (mainly for testing)."""
    global _registry
    _registry = None


def register_builtin_plugins(enabled: Optional[list[str]] = None) -> None:
    """
    Register the built-in plugins.

    Called once during startup, before any action is dispatched.

    Args:
        enabled: Plugin names to register. None or empty registers all.
    """
    from plugins.redis import RedisPlugin

    registry = get_registry()
    builtin = {RedisPlugin.name: RedisPlugin}

    for name in enabled or list(builtin.keys()):
        plugin_class = builtin.get(name)
        if plugin_class is None:
            logger.warning(f"Plugin '{name}' is not a built-in plugin, skipping")
            continue
        registry.register_plugin(plugin_class())
