# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Library types for CSS/JS asset libraries."""

from extlib.library import AssetLibrary, MultipleAssetLibrary, prefix_path, rewrite_path
from extlib.registry import library_type

from .base import LibraryType


class _AssetTypeBase(LibraryType):
    """Shared creation hook for asset library types."""

    @property
    def path_rewriter(self):
        """Path rewriter handed to the libraries this type builds."""
        if self.config is not None and getattr(self.config, 'rewrite_asset_paths', False):
            return prefix_path
        return rewrite_path

    def on_library_create(self, library) -> None:
        self.locate(library)
        self.detect_version(library)


@library_type('asset')
class AssetLibraryType(_AssetTypeBase):
    """Single asset library served locally or remotely."""

    def get_library_class(self) -> type:
        return AssetLibrary


@library_type('asset_multiple')
class MultipleAssetLibraryType(_AssetTypeBase):
    """Library exposing several named asset libraries."""

    def get_library_class(self) -> type:
        return MultipleAssetLibrary
