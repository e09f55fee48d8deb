# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""extlib - external library resolution and lifecycle management.

    from extlib import LibraryManager

    manager = LibraryManager.from_config()
    library = manager.get_library('jquery')
    if library.can_be_attached():
        assets = library.get_attachable_asset_library()
"""

from .exceptions import (
    DefinitionNotFoundError,
    InvalidDefinitionError,
    LibraryConstructionError,
    LibraryError,
    LibraryNotInstalledError,
    LibraryTypeNotFoundError,
    LocatorConfigurationError,
    PluginError,
    PluginRegistrationError,
    UnknownLibraryVersionError,
    UnknownPluginError,
    UnknownTypeHandlerError,
)
from .manager import LibraryManager

__version__ = "0.1.0"

__all__ = [
    "LibraryManager",
    # Exceptions
    "LibraryError",
    "DefinitionNotFoundError",
    "InvalidDefinitionError",
    "LibraryTypeNotFoundError",
    "PluginError",
    "UnknownPluginError",
    "UnknownTypeHandlerError",
    "PluginRegistrationError",
    "LibraryConstructionError",
    "LibraryNotInstalledError",
    "UnknownLibraryVersionError",
    "LocatorConfigurationError",
]
