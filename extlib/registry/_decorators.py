# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Plugin registration via @library_type, @locator, @version_detector decorators.

Every plugin is validated once, when it is registered. Lookups never have
to check what a plugin is capable of.

Logging Strategy:
    - DEBUG: Individual plugin registrations
    - ERROR: Not used; invalid plugins raise PluginRegistrationError
"""

import inspect
import logging
from typing import Any, Optional

from extlib.exceptions import PluginRegistrationError

from ._metadata import LifecycleHooks, PluginKind, PluginMetadata
from ._state import _plugin_index
from .constants import CORE_NAMESPACE, SOURCE_CUSTOM

logger = logging.getLogger(__name__)

# Method each plugin kind must provide
_REQUIRED_METHODS = {
    PluginKind.LIBRARY_TYPE: 'get_library_class',
    PluginKind.LOCATOR: 'locate',
    PluginKind.VERSION_DETECTOR: 'detect_version',
}


def _detect_source(obj: Any) -> str:
    """'extlib' for built-in plugins, 'custom' for everything else."""
    module_name = getattr(obj, '__module__', '') or ''
    if module_name == CORE_NAMESPACE or module_name.startswith(f'{CORE_NAMESPACE}.'):
        return CORE_NAMESPACE
    return SOURCE_CUSTOM


def build_metadata(
    kind: PluginKind,
    plugin_id: str,
    factory: Any,
    source: Optional[str] = None,
) -> PluginMetadata:
    """Validate a plugin and build its registry metadata.

    Raises:
        PluginRegistrationError: If the plugin id is empty or the plugin
            does not provide the method its kind requires
    """
    if not isinstance(plugin_id, str) or not plugin_id:
        raise PluginRegistrationError(f"Invalid {kind} plugin id: {plugin_id!r}")

    required = _REQUIRED_METHODS[kind]
    if not callable(getattr(factory, required, None)):
        raise PluginRegistrationError(
            f"{kind} plugin '{plugin_id}' ({factory!r}) must implement {required}()"
        )

    hooks = LifecycleHooks()
    if kind is PluginKind.LIBRARY_TYPE:
        if not inspect.isclass(factory):
            raise PluginRegistrationError(
                f"library_type plugin '{plugin_id}' must be a class, got {factory!r}"
            )
        hooks = LifecycleHooks.from_class(factory)
        factory.lifecycle_hooks = hooks

    return PluginMetadata(
        plugin_id=plugin_id,
        kind=kind,
        factory=factory,
        source=source or _detect_source(factory),
        lifecycle_hooks=hooks,
    )


def add_to_index(index: dict[str, PluginMetadata], meta: PluginMetadata) -> PluginMetadata:
    """Insert validated metadata into an index.

    Re-registering the same factory under the same id is a no-op.

    Raises:
        PluginRegistrationError: If a different factory already owns the id
    """
    existing = index.get(meta.plugin_id)
    if existing is not None:
        if existing.factory is meta.factory:
            logger.debug(f"{meta.kind} {meta.full_name} already registered, skipping")
            return existing
        raise PluginRegistrationError(
            f"{meta.kind} plugin id '{meta.plugin_id}' is already registered by "
            f"{existing.factory!r} (source '{existing.source}')"
        )

    logger.debug(f"Registering {meta.kind}: {meta.full_name} hooks={meta.lifecycle_hooks}")
    index[meta.plugin_id] = meta
    return meta


def register_plugin(
    kind: PluginKind | str,
    plugin_id: str,
    factory: Any,
    source: Optional[str] = None,
) -> PluginMetadata:
    """Register a plugin in the global plugin index.

    Args:
        kind: Plugin kind (enum or its string value)
        plugin_id: Id the plugin is created by
        factory: Plugin class, or any callable with the kind's required method
        source: Source name (default: detected from the factory's module)

    Returns:
        Registered PluginMetadata
    """
    if isinstance(kind, str):
        kind = PluginKind.from_string(kind)
    meta = build_metadata(kind, plugin_id, factory, source)
    return add_to_index(_plugin_index[kind], meta)


def _decorator(kind: PluginKind, plugin_id: str):
    def register(cls):
        cls.plugin_id = plugin_id
        register_plugin(kind, plugin_id, cls)
        return cls
    return register


# ============================================================================
# Public Decorator API
# ============================================================================

def library_type(plugin_id: str):
    """Register a library type handler class.

    The class must implement get_library_class(). Implementing
    on_library_create(library) and/or on_library_load(library) subscribes
    the type to the matching lifecycle event.

    Examples:
        >>> from extlib.registry import library_type
        >>>
        >>> @library_type('asset')
        ... class AssetLibraryType(LibraryType):
        ...     def get_library_class(self):
        ...         return AssetLibrary
    """
    return _decorator(PluginKind.LIBRARY_TYPE, plugin_id)


def locator(plugin_id: str):
    """Register a locator class (must implement locate(library))."""
    return _decorator(PluginKind.LOCATOR, plugin_id)


def version_detector(plugin_id: str):
    """Register a version detector class (must implement detect_version(library))."""
    return _decorator(PluginKind.VERSION_DETECTOR, plugin_id)


__all__ = ['library_type', 'locator', 'version_detector', 'register_plugin']
