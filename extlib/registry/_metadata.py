# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Plugin metadata structures for the registry system.

Defines data structures used throughout the plugin registry:
- PluginKind: Enum for plugin kinds (library type, locator, version detector)
- LibraryCreationListener, LibraryLoadingListener: Lifecycle listener protocols
- LifecycleHooks: Lifecycle hooks a library type supports
- PluginMetadata: Metadata for registered plugins
"""

from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Any, Protocol, runtime_checkable


class PluginKind(Enum):
    """Plugin kind enumeration.

    Attributes:
        LIBRARY_TYPE: Library type handler (builds Library objects)
        LOCATOR: Locates libraries on the local filesystem
        VERSION_DETECTOR: Detects the version of a located library
    """

    LIBRARY_TYPE = 'library_type'
    LOCATOR = 'locator'
    VERSION_DETECTOR = 'version_detector'

    def __str__(self) -> str:
        """String representation for display and error messages."""
        return self.value

    @classmethod
    def from_string(cls, s: str) -> "PluginKind":
        """Parse plugin kind from string.

        Raises:
            ValueError: If string doesn't match any plugin kind

        Example:
            >>> PluginKind.from_string('locator')
            <PluginKind.LOCATOR: 'locator'>
        """
        try:
            return cls(s.lower())
        except ValueError:
            valid = ", ".join(k.value for k in cls)
            raise ValueError(f"Invalid plugin kind: '{s}'. Must be one of: {valid}")


@runtime_checkable
class LibraryCreationListener(Protocol):
    """Reacts once after a library has been constructed."""

    def on_library_create(self, library) -> None:
        ...


@runtime_checkable
class LibraryLoadingListener(Protocol):
    """Reacts when a library is explicitly loaded into the current process."""

    def on_library_load(self, library) -> None:
        ...


@dataclass(frozen=True)
class LifecycleHooks:
    """Lifecycle hooks declared by a library type.

    Registration stamps them on the library type class. Handlers whose
    class was never registered get them computed once per class.

    Attributes:
        on_create: Type implements LibraryCreationListener
        on_load: Type implements LibraryLoadingListener
    """

    on_create: bool = False
    on_load: bool = False

    @classmethod
    def from_class(cls, handler_cls: type) -> "LifecycleHooks":
        """Read the hooks a library type class implements."""
        return cls(
            on_create=issubclass(handler_cls, LibraryCreationListener),
            on_load=issubclass(handler_cls, LibraryLoadingListener),
        )

    @classmethod
    def of(cls, handler: Any) -> "LifecycleHooks":
        """Hooks of a library type handler, however it was created.

        Uses the hooks stamped on the handler's own class at registration;
        subclasses and unregistered classes are inspected instead.
        """
        handler_cls = type(handler)
        stamped = handler_cls.__dict__.get('lifecycle_hooks')
        if isinstance(stamped, cls):
            return stamped
        return _hooks_for_class(handler_cls)


@lru_cache(maxsize=None)
def _hooks_for_class(handler_cls: type) -> LifecycleHooks:
    return LifecycleHooks.from_class(handler_cls)


@dataclass
class PluginMetadata:
    """Metadata for a registered plugin.

    Attributes:
        plugin_id: Plugin id (e.g., 'asset', 'stream')
        kind: Plugin kind
        factory: Class (or callable) building plugin instances
        source: Where the plugin came from ('extlib', entry point name, 'custom')
        lifecycle_hooks: Supported hooks (library types only)
    """

    plugin_id: str
    kind: PluginKind
    factory: Any
    source: str
    lifecycle_hooks: LifecycleHooks = field(default_factory=LifecycleHooks)

    @property
    def full_name(self) -> str:
        """Get source-prefixed name (e.g., 'extlib:asset')."""
        return f"{self.source}:{self.plugin_id}"
