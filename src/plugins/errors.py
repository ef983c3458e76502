"""
Plugin errors.

Every failure raised by an action or registry lookup derives from
PluginError so callers can catch the whole family at one point.
"""

from typing import Optional


class PluginError(Exception):
    """Base class for all plugin errors."""


class MalformedInputError(PluginError, ValueError):
    """The raw payload does not match the expected shape."""

    def __init__(self, message: str, index: Optional[int] = None, guid: str = ""):
        self.index = index
        self.guid = guid
        super().__init__(message)


class TypeMismatchError(PluginError, TypeError):
    """An action received input it did not produce with read_param()."""


class ParamValidationError(PluginError, ValueError):
    """A resource spec violates a business rule."""

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        guid: str = "",
        field: Optional[str] = None,
    ):
        self.index = index
        self.guid = guid
        self.field = field
        super().__init__(message)


class ProvisioningError(PluginError):
    """A provisioning call for one resource failed; the batch was aborted."""

    def __init__(self, message: str, resource_id: str = "", index: Optional[int] = None):
        self.resource_id = resource_id
        self.index = index
        super().__init__(message)


class ActionNotFoundError(PluginError, LookupError):
    """No action with the requested name is registered on the plugin."""

    def __init__(self, plugin: str, action: str, available: Optional[list] = None):
        self.plugin = plugin
        self.action = action
        self.available = list(available or [])
        super().__init__(
            f"{plugin} plugin: action '{action}' not found. "
            f"Available actions: {', '.join(self.available) or 'none'}"
        )


class PluginNotFoundError(PluginError, LookupError):
    """No plugin with the requested name is registered."""

    def __init__(self, name: str, available: Optional[list] = None):
        self.name = name
        self.available = list(available or [])
        super().__init__(
            f"Unknown plugin: {name}. "
            f"Available plugins: {', '.join(self.available) or 'none'}"
        )
