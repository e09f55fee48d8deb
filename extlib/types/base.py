# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Library type handler base class and lifecycle listener protocols.

A library type knows which Library class to build for a definition. It
subscribes to lifecycle events simply by implementing the listener methods;
registration records which ones it implements in ``lifecycle_hooks``.
"""

import logging
from typing import Any, ClassVar, Mapping

from extlib.registry import LibraryCreationListener, LibraryLoadingListener, LifecycleHooks

logger = logging.getLogger(__name__)

__all__ = ['LibraryType', 'LibraryCreationListener', 'LibraryLoadingListener']


class LibraryType:
    """Base class for library type handlers.

    Subclasses implement get_library_class() and any listener methods they
    need. Neither listener method is defined here, so that the hooks a type
    supports can be read off its class at registration time.

    Attributes:
        plugin_id: Registered id (set by the @library_type decorator)
        lifecycle_hooks: Hooks implemented (set at registration)
        locator_factory: Registry used to locate local libraries
        version_detector_factory: Registry used to detect versions
        config: SystemConfig, when created through a registry
    """

    plugin_id: ClassVar[str] = ''
    lifecycle_hooks: ClassVar[LifecycleHooks] = LifecycleHooks()

    def __init__(self, locator_factory=None, version_detector_factory=None, config=None):
        self.locator_factory = locator_factory
        self.version_detector_factory = version_detector_factory
        self.config = config

    @classmethod
    def create(cls, services: Mapping[str, Any], configuration: Mapping[str, Any], plugin_id: str):
        return cls(
            locator_factory=services.get('locator_factory'),
            version_detector_factory=services.get('version_detector_factory'),
            config=services.get('config'),
        )

    def get_library_class(self) -> type:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers for types of locally installable libraries
    # ------------------------------------------------------------------

    def locate(self, library) -> None:
        """Let the library's locator record whether and where it is installed."""
        library.get_locator(self.locator_factory).locate(library)
        logger.debug(
            f"Located {library.id}: "
            + (f"installed at {library.get_local_path()}" if library.is_installed() else "not installed")
        )

    def detect_version(self, library) -> None:
        """Run the library's version detector, if it has one and is installed locally."""
        if not library.is_installed():
            return
        detector = library.get_version_detector(self.version_detector_factory)
        if detector is not None:
            detector.detect_version(library)
            logger.debug(f"Detected version {library.version} for {library.id}")
