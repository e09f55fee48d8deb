# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Concrete library implementations and their capability objects."""

from .asset import AssetLibrary, MultipleAssetLibrary
from .assets import (
    SMACSS_CATEGORIES,
    AssetMap,
    AssetResolver,
    JsAssetMap,
    prefix_path,
    rewrite_path,
)
from .base import Library, LocalInstallation, LocalLibrary
from .python_file import PythonFileLibrary

__all__ = [
    "Library",
    "LocalLibrary",
    "LocalInstallation",
    "AssetLibrary",
    "MultipleAssetLibrary",
    "PythonFileLibrary",
    "AssetResolver",
    "AssetMap",
    "JsAssetMap",
    "SMACSS_CATEGORIES",
    "rewrite_path",
    "prefix_path",
]
