# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Built-in library types."""

from .asset import AssetLibraryType, MultipleAssetLibraryType
from .base import LibraryCreationListener, LibraryLoadingListener, LibraryType
from .python_file import PythonFileLibraryType, PythonFileLoader

PLUGIN_KIND = 'library_type'
PLUGINS = [AssetLibraryType, MultipleAssetLibraryType, PythonFileLibraryType]

__all__ = [
    "LibraryType",
    "LibraryCreationListener",
    "LibraryLoadingListener",
    "AssetLibraryType",
    "MultipleAssetLibraryType",
    "PythonFileLibraryType",
    "PythonFileLoader",
]
