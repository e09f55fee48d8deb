# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Library base classes.

A Library is built by its library type from ``(library_id, definition,
library_type)``. Libraries copy what they need out of the definition and
never modify it.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional

from extlib.exceptions import LibraryConstructionError, LibraryNotInstalledError


def _list_field(library_id: str, definition: Mapping[str, Any], key: str) -> list:
    """Copy an optional list entry of a definition, validating its type."""
    value = definition.get(key, [])
    if not isinstance(value, (list, tuple)):
        raise LibraryConstructionError(
            library_id, f"'{key}' must be a list, got {type(value).__name__}"
        )
    return list(value)


class Library:
    """A resolved external library.

    Attributes:
        library_type: Type handler that built this library
        dependencies: Ids of libraries this library depends on
        version: Library version (static or detected), None if unknown
    """

    def __init__(self, library_id: str, definition: Mapping[str, Any], library_type):
        self._id = library_id
        self.library_type = library_type
        self.dependencies: list[str] = _list_field(library_id, definition, 'dependencies')
        self.version: Optional[str] = definition.get('version')

        detector = definition.get('version_detector')
        if detector is not None and not (isinstance(detector, Mapping) and detector.get('id')):
            raise LibraryConstructionError(
                library_id, "'version_detector' must be a mapping with an 'id'"
            )
        self._version_detector: Optional[Mapping[str, Any]] = detector

    @classmethod
    def create(cls, library_id: str, definition: Mapping[str, Any], library_type) -> "Library":
        """Construction entry point used by the library manager."""
        return cls(library_id, definition, library_type)

    @property
    def id(self) -> str:
        return self._id

    def set_version(self, version: str) -> None:
        self.version = version

    def get_version_detector(self, detector_factory):
        """Create the version detector named by the definition, or None."""
        if self._version_detector is None:
            return None
        return detector_factory.create_instance(
            self._version_detector['id'],
            self._version_detector.get('configuration') or {},
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"


class LocalInstallation:
    """Local installation state of a library, as reported by its locator."""

    def __init__(self, library_id: str):
        self.library_id = library_id
        self.installed = False
        self.local_path: Optional[str] = None

    def is_installed(self) -> bool:
        return self.installed

    def get_local_path(self) -> str:
        """Path of the local copy.

        Raises:
            LibraryNotInstalledError: If the library is not installed locally
        """
        if not self.installed:
            raise LibraryNotInstalledError(self.library_id)
        return self.local_path

    def set_local_path(self, path: str) -> None:
        """Mark the library as installed at path."""
        self.installed = True
        self.local_path = str(path)

    def set_uninstalled(self) -> None:
        self.installed = False
        self.local_path = None


class LocalLibrary(Library):
    """Library that can be installed on the local filesystem.

    Locators report their findings through set_local_path() and
    set_uninstalled(); install-status queries read the LocalInstallation.
    """

    # Locator plugin and configuration used to find this kind of library
    LOCATOR_ID = 'stream'
    LOCATOR_CONFIGURATION: Mapping[str, Any] = MappingProxyType({})

    def __init__(self, library_id: str, definition: Mapping[str, Any], library_type):
        super().__init__(library_id, definition, library_type)
        self.installation = LocalInstallation(library_id)

    def get_locator(self, locator_factory):
        return locator_factory.create_instance(self.LOCATOR_ID, dict(self.LOCATOR_CONFIGURATION))

    def is_installed(self) -> bool:
        return self.installation.is_installed()

    def get_local_path(self) -> str:
        return self.installation.get_local_path()

    def set_local_path(self, path: str) -> None:
        self.installation.set_local_path(path)

    def set_uninstalled(self) -> None:
        self.installation.set_uninstalled()
