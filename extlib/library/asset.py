# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Asset libraries: CSS/JS served from a local copy or a remote URL."""

from typing import Any, Mapping

from extlib.exceptions import LibraryConstructionError, LibraryNotInstalledError

from .assets import AssetMap, AssetResolver, JsAssetMap, rewrite_path
from .base import LocalLibrary, _list_field


def _path_rewriter(library_type):
    return getattr(library_type, 'path_rewriter', None) or rewrite_path


class AssetLibrary(LocalLibrary):
    """A single library of CSS and JavaScript files.

    Definition keys: css, js, remote_url, dependencies, version,
    version_detector.
    """

    def __init__(self, library_id: str, definition: Mapping[str, Any], library_type):
        super().__init__(library_id, definition, library_type)
        self.assets = AssetResolver.from_definition(
            library_id, definition, self.installation, path_rewriter=_path_rewriter(library_type)
        )

    def get_locator(self, locator_factory):
        return self.assets.get_locator(locator_factory)

    @property
    def remote_url(self) -> str:
        return self.assets.remote_url

    def has_remote_url(self) -> bool:
        return self.assets.has_remote_url()

    def can_be_attached(self) -> bool:
        return self.assets.can_be_attached()

    def get_css_assets(self) -> AssetMap:
        return self.assets.get_css_assets()

    def get_js_assets(self) -> JsAssetMap:
        return self.assets.get_js_assets()

    def get_attachable_asset_library(self) -> dict[str, Any]:
        """Library in the form an asset-emission system attaches it.

        Returns:
            Dict with 'version', 'css', 'js' and 'dependencies'

        Raises:
            LibraryNotInstalledError: If the library can't be attached
        """
        if not self.can_be_attached():
            raise LibraryNotInstalledError(self.id)
        return {
            'version': self.version,
            'css': self.get_css_assets(),
            'js': self.get_js_assets(),
            'dependencies': list(self.dependencies),
        }


class MultipleAssetLibrary(LocalLibrary):
    """A library shipping several separately attachable asset libraries.

    The definition's 'libraries' entry maps a name to its own css, js and
    dependencies. All of them share the library's local copy and remote URL
    and are exposed as '<library id>.<name>'.
    """

    def __init__(self, library_id: str, definition: Mapping[str, Any], library_type):
        super().__init__(library_id, definition, library_type)

        libraries = definition.get('libraries') or {}
        if not isinstance(libraries, Mapping):
            raise LibraryConstructionError(library_id, "'libraries' must be a mapping")

        # Shared local copy and remote URL; holds no assets of its own
        self.assets = AssetResolver.from_definition(
            library_id,
            {'remote_url': definition.get('remote_url')},
            self.installation,
            path_rewriter=_path_rewriter(library_type),
        )
        self.asset_libraries: dict[str, AssetResolver] = {}
        self.library_dependencies: dict[str, list[str]] = {}
        for name, sub_definition in libraries.items():
            if not isinstance(sub_definition, Mapping):
                raise LibraryConstructionError(library_id, f"library '{name}' must be a mapping")
            self.asset_libraries[name] = AssetResolver.from_definition(
                library_id,
                sub_definition,
                self.installation,
                path_rewriter=self.assets.path_rewriter,
                remote_url=self.assets.remote_url,
            )
            self.library_dependencies[name] = _list_field(library_id, sub_definition, 'dependencies')

    def get_locator(self, locator_factory):
        return self.assets.get_locator(locator_factory)

    @property
    def remote_url(self) -> str:
        return self.assets.remote_url

    def has_remote_url(self) -> bool:
        return self.assets.has_remote_url()

    def can_be_attached(self) -> bool:
        return self.assets.can_be_attached()

    def get_attachable_asset_libraries(self) -> dict[str, dict[str, Any]]:
        """Every sub-library keyed '<library id>.<name>'.

        Raises:
            LibraryNotInstalledError: If the library can't be attached
        """
        if not self.can_be_attached():
            raise LibraryNotInstalledError(self.id)
        return {
            f"{self.id}.{name}": {
                'version': self.version,
                'css': resolver.get_css_assets(),
                'js': resolver.get_js_assets(),
                'dependencies': list(self.library_dependencies[name]),
            }
            for name, resolver in self.asset_libraries.items()
        }
