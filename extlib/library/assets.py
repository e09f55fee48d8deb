# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Local/remote asset resolution.

If the library files are available locally, they are served locally.
Otherwise the remote files are served, assuming a remote URL is specified.

AssetResolver is the capability object asset libraries hold to get this
behavior. Which asset paths a library declares is independent of whether it
can currently be attached.
"""

import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional
from urllib.parse import urlsplit

from extlib.exceptions import LibraryConstructionError

from .base import LocalInstallation

logger = logging.getLogger(__name__)

# SMACSS categories, in the order they are emitted (https://smacss.com/)
SMACSS_CATEGORIES = ('base', 'layout', 'component', 'state', 'theme')

AssetMap = dict[str, dict[str, dict[str, Any]]]
JsAssetMap = dict[str, dict[str, Any]]
PathRewriter = Callable[[str, bool, Optional[str], Optional[str]], str]


# ============================================================================
# Path Rewriting
# ============================================================================

def rewrite_path(path: str, is_local: bool, local_base: Optional[str], remote_base: Optional[str]) -> str:
    """Default path rewriter: asset paths are exposed exactly as defined."""
    return path


def prefix_path(path: str, is_local: bool, local_base: Optional[str], remote_base: Optional[str]) -> str:
    """Prefix a relative asset path with the local path or the remote URL.

    URLs, protocol-relative and rooted paths are returned unchanged, as are
    paths for which the relevant base is unknown.
    """
    if urlsplit(path).scheme or path.startswith('/'):
        return path

    base = local_base if is_local else remote_base
    if not base:
        return path

    if path.startswith('./'):
        path = path[2:]
    return f"{base.rstrip('/')}/{path}"


# ============================================================================
# Definition Parsing
# ============================================================================

def _options(library_id: str, path: str, options: Any) -> dict[str, Any]:
    if options is None:
        return {}
    if not isinstance(options, Mapping):
        raise LibraryConstructionError(library_id, f"options for asset '{path}' must be a mapping")
    return dict(options)


def parse_css_assets(library_id: str, css: Any) -> AssetMap:
    """Copy a definition's CSS entry, validating SMACSS categories.

    Raises:
        LibraryConstructionError: On an unknown category or malformed entry
    """
    if not css:
        return {}
    if not isinstance(css, Mapping):
        raise LibraryConstructionError(library_id, "'css' must be a mapping of SMACSS categories")

    assets: AssetMap = {}
    for category, files in css.items():
        if category not in SMACSS_CATEGORIES:
            raise LibraryConstructionError(
                library_id,
                f"invalid CSS category '{category}', must be one of: {', '.join(SMACSS_CATEGORIES)}",
            )
        if not isinstance(files, Mapping):
            raise LibraryConstructionError(library_id, f"CSS category '{category}' must be a mapping")
        assets[category] = {path: _options(library_id, path, opts) for path, opts in files.items()}
    return assets


def parse_js_assets(library_id: str, js: Any) -> JsAssetMap:
    """Copy a definition's JS entry.

    Raises:
        LibraryConstructionError: If the entry is not a mapping
    """
    if not js:
        return {}
    if not isinstance(js, Mapping):
        raise LibraryConstructionError(library_id, "'js' must be a mapping of file paths")
    return {path: _options(library_id, path, opts) for path, opts in js.items()}


# ============================================================================
# Asset Resolver
# ============================================================================

class AssetResolver:
    """Serves a library's assets from its local copy or its remote URL.

    Every asset library finds its local copy through the same locator: the
    'stream' locator with scheme 'asset'.

    Attributes:
        installation: Local installation state shared with the owning library
        css_assets: Stored CSS AssetMap
        js_assets: Stored JS asset map
        remote_url: Remote base URL ('' when the library is local only)
        path_rewriter: Applied to every asset path on exposure
    """

    LOCATOR_ID = 'stream'
    LOCATOR_CONFIGURATION: Mapping[str, Any] = MappingProxyType({'scheme': 'asset'})

    def __init__(
        self,
        installation: LocalInstallation,
        css_assets: Optional[AssetMap] = None,
        js_assets: Optional[JsAssetMap] = None,
        remote_url: str = '',
        path_rewriter: PathRewriter = rewrite_path,
    ):
        self.installation = installation
        self.css_assets: AssetMap = css_assets or {}
        self.js_assets: JsAssetMap = js_assets or {}
        self.remote_url = remote_url or ''
        self.path_rewriter = path_rewriter

    @classmethod
    def from_definition(
        cls,
        library_id: str,
        definition: Mapping[str, Any],
        installation: LocalInstallation,
        path_rewriter: PathRewriter = rewrite_path,
        remote_url: Optional[str] = None,
    ) -> "AssetResolver":
        """Build a resolver from the css/js/remote_url entries of a definition."""
        if remote_url is None:
            remote_url = definition.get('remote_url') or ''
        if not isinstance(remote_url, str):
            raise LibraryConstructionError(library_id, "'remote_url' must be a string")

        return cls(
            installation,
            css_assets=parse_css_assets(library_id, definition.get('css')),
            js_assets=parse_js_assets(library_id, definition.get('js')),
            remote_url=remote_url,
            path_rewriter=path_rewriter,
        )

    def get_locator(self, locator_factory):
        """Create the locator that determines install status and local path."""
        return locator_factory.create_instance(self.LOCATOR_ID, dict(self.LOCATOR_CONFIGURATION))

    def has_remote_url(self) -> bool:
        return bool(self.remote_url)

    def can_be_attached(self) -> bool:
        """True if the library is installed locally or has a remote URL."""
        return self.installation.is_installed() or self.has_remote_url()

    def _rewrite(self, path: str) -> str:
        is_local = self.installation.is_installed()
        local_base = self.installation.local_path if is_local else None
        return self.path_rewriter(path, is_local, local_base, self.remote_url or None)

    def get_css_assets(self) -> AssetMap:
        """CSS assets keyed by SMACSS category, then by file path.

        Returns a new map on every call; categories and paths keep their
        definition order.
        """
        return {
            category: {self._rewrite(path): dict(options) for path, options in files.items()}
            for category, files in self.css_assets.items()
        }

    def get_js_assets(self) -> JsAssetMap:
        """JS assets keyed by file path, in definition order."""
        return {self._rewrite(path): dict(options) for path, options in self.js_assets.items()}
