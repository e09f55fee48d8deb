# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Plugin factories over the plugin index.

A PluginRegistry is the factory a library manager, library type or asset
resolver is handed: create_instance(plugin_id, configuration) builds a new
plugin every call. Nothing is cached.
"""

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

from extlib.exceptions import UnknownPluginError, UnknownTypeHandlerError

from . import _state
from ._decorators import add_to_index, build_metadata
from ._discovery import discover_plugins
from ._metadata import PluginKind, PluginMetadata

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Factory for one plugin kind.

    Plugins are built with ``factory.create(services, configuration, plugin_id)``
    when the factory defines ``create``, otherwise with
    ``factory(**configuration)``.

    Args:
        kind: Plugin kind served by this registry
        services: Shared objects handed to plugin create() methods
            (other factories, the SystemConfig)
        isolated: Use a private, initially empty index instead of the
            global one (no discovery is run)

    Examples:
        >>> types = PluginRegistry(PluginKind.LIBRARY_TYPE, services)
        >>> handler = types.create_instance('asset')
    """

    def __init__(
        self,
        kind: PluginKind | str,
        services: Optional[Mapping[str, Any]] = None,
        isolated: bool = False,
    ):
        self.kind = PluginKind.from_string(kind) if isinstance(kind, str) else kind
        self._services: dict[str, Any] = dict(services or {})
        self._index: Optional[dict[str, PluginMetadata]] = {} if isolated else None

    @property
    def services(self) -> Mapping[str, Any]:
        """Read-only view of the services handed to plugins."""
        return MappingProxyType(self._services)

    def add_service(self, name: str, service: Any) -> None:
        """Make a service available to plugins created after this call."""
        self._services[name] = service

    def _plugins(self) -> dict[str, PluginMetadata]:
        if self._index is not None:
            return self._index
        if not _state.plugins_discovered:
            discover_plugins()
        return _state._plugin_index[self.kind]

    def register(self, plugin_id: str, factory: Any) -> PluginMetadata:
        """Register a plugin with this registry only (global registries write the global index)."""
        meta = build_metadata(self.kind, plugin_id, factory)
        return add_to_index(self._plugins(), meta)

    def has_plugin(self, plugin_id: str) -> bool:
        return plugin_id in self._plugins()

    def list_plugins(self) -> list[str]:
        """Sorted ids of the registered plugins."""
        return sorted(self._plugins())

    def get_metadata(self, plugin_id: str) -> PluginMetadata:
        """Get registry metadata for a plugin id.

        Raises:
            UnknownPluginError: If the id is not registered
                (UnknownTypeHandlerError for library types)
        """
        meta = self._plugins().get(plugin_id)
        if meta is None:
            error_cls = (
                UnknownTypeHandlerError if self.kind is PluginKind.LIBRARY_TYPE
                else UnknownPluginError
            )
            raise error_cls(self.kind.value, plugin_id, self.list_plugins())
        return meta

    def create_instance(self, plugin_id: str, configuration: Optional[Mapping[str, Any]] = None):
        """Create a new plugin instance.

        Args:
            plugin_id: Registered plugin id
            configuration: Plugin configuration

        Returns:
            New plugin instance

        Raises:
            UnknownPluginError: If the id is not registered
                (UnknownTypeHandlerError for library types)
        """
        meta = self.get_metadata(plugin_id)
        configuration = dict(configuration or {})
        logger.debug(f"Creating {self.kind}: {meta.full_name} {configuration}")

        factory = meta.factory
        if callable(getattr(factory, 'create', None)):
            return factory.create(self.services, configuration, plugin_id)
        return factory(**configuration)


def create_default_registries(config=None) -> dict[str, PluginRegistry]:
    """Build the library type, locator and version detector registries.

    Library types receive the other two registries as services
    ('locator_factory', 'version_detector_factory'); every registry
    receives the SystemConfig as 'config'.

    Args:
        config: SystemConfig (default: get_config())

    Returns:
        Dict with 'library_type_factory', 'locator_factory' and
        'version_detector_factory'
    """
    if config is None:
        from extlib.settings import get_config
        config = get_config()

    locators = PluginRegistry(PluginKind.LOCATOR, {'config': config})
    detectors = PluginRegistry(PluginKind.VERSION_DETECTOR, {'config': config})
    library_types = PluginRegistry(
        PluginKind.LIBRARY_TYPE,
        {
            'config': config,
            'locator_factory': locators,
            'version_detector_factory': detectors,
        },
    )
    # Chain locators build their member locators through the same factory
    locators.add_service('locator_factory', locators)

    return {
        'library_type_factory': library_types,
        'locator_factory': locators,
        'version_detector_factory': detectors,
    }
