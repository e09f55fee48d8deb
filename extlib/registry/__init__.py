# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""extlib Plugin Registry.

Public API for plugin registration, discovery and creation.

Registration (for plugin authors):
    from extlib.registry import library_type, locator, version_detector

    @library_type('asset')
    class AssetLibraryType(LibraryType):
        ...

    @locator('stream')
    class StreamLocator:
        ...

Creation (for the library manager):
    from extlib.registry import PluginKind, PluginRegistry

    types = PluginRegistry(PluginKind.LIBRARY_TYPE, services)
    handler = types.create_instance('asset')
"""

from ._decorators import library_type, locator, register_plugin, version_detector
from ._discovery import discover_plugins, reset_registry
from ._factory import PluginRegistry, create_default_registries
from ._metadata import (
    LibraryCreationListener,
    LibraryLoadingListener,
    LifecycleHooks,
    PluginKind,
    PluginMetadata,
)
from .constants import CORE_NAMESPACE, ENTRY_POINT_GROUP, SOURCE_CUSTOM


def is_initialized() -> bool:
    """Check if plugin discovery has completed."""
    from . import _state

    return _state.plugins_discovered


__all__ = [
    # Constants
    "CORE_NAMESPACE",
    "ENTRY_POINT_GROUP",
    "SOURCE_CUSTOM",
    # Metadata Structures
    "LibraryCreationListener",
    "LibraryLoadingListener",
    "LifecycleHooks",
    "PluginKind",
    "PluginMetadata",
    # Registration
    "library_type",
    "locator",
    "version_detector",
    "register_plugin",
    # Discovery and Lifecycle
    "discover_plugins",
    "reset_registry",
    "is_initialized",
    # Factories
    "PluginRegistry",
    "create_default_registries",
]
