"""
Plugin system for cloud resource provisioning.

This package provides the action contract, the shared batch executor and
the registry resource plugins are looked up from.
"""

from plugins.base import ProvisionResult, ResourceSpecBatch, ResultBatch
from plugins.errors import (
    ActionNotFoundError,
    MalformedInputError,
    ParamValidationError,
    PluginError,
    PluginNotFoundError,
    ProvisioningError,
    TypeMismatchError,
)
from plugins.registry import PluginRegistry, get_registry

__all__ = [
    "ProvisionResult",
    "ResourceSpecBatch",
    "ResultBatch",
    "ActionNotFoundError",
    "MalformedInputError",
    "ParamValidationError",
    "PluginError",
    "PluginNotFoundError",
    "ProvisioningError",
    "TypeMismatchError",
    "PluginRegistry",
    "get_registry",
]
