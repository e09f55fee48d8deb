# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Plugin discovery for the registry system.

Discovers plugins from two sources:
- extlib built-in plugins (library types, locators, version detectors)
- Entry points in the 'extlib.plugins' group from installed packages

Logging Strategy:
    - DEBUG: Individual plugin indexing
    - INFO: Discovery start/complete
    - WARNING: Entry point group unavailable
    - ERROR: Entry point load failures (re-raised in strict mode)
"""

import importlib
import logging
from importlib.metadata import entry_points

from . import _state
from ._decorators import register_plugin
from ._metadata import PluginKind
from .constants import BUILTIN_PLUGIN_MODULES, CORE_NAMESPACE, ENTRY_POINT_GROUP, ENTRY_POINT_KEYS

logger = logging.getLogger(__name__)


def _is_strict_mode() -> bool:
    """Check if plugins_strict setting is enabled (False if config is unavailable)."""
    try:
        from extlib.settings import get_config
        return get_config().plugins_strict
    except (ImportError, AttributeError):
        return False


def _register_plugin_list(source: str, plugins: dict) -> int:
    """Register {'library_types': [...], 'locators': [...], ...} entries.

    Each entry is a class carrying a plugin_id attribute.
    """
    count = 0
    for kind in PluginKind:
        for factory in plugins.get(ENTRY_POINT_KEYS[kind.value], []):
            register_plugin(kind, factory.plugin_id, factory, source=source)
            count += 1
    return count


def _load_builtin_plugins() -> None:
    """Register the PLUGINS list of every built-in plugin module."""
    for module_name in BUILTIN_PLUGIN_MODULES:
        module = importlib.import_module(module_name)
        kind = PluginKind.from_string(module.PLUGIN_KIND)
        for factory in module.PLUGINS:
            register_plugin(kind, factory.plugin_id, factory, source=CORE_NAMESPACE)


def _load_entry_point_plugins() -> None:
    """Load plugins from pip package entry points.

    Each entry point in the 'extlib.plugins' group resolves to a function
    returning a dict of plugin class lists keyed by 'library_types',
    'locators' and 'version_detectors'. The entry point name is the source.
    """
    logger.debug("Scanning entry points")

    try:
        eps = entry_points(group=ENTRY_POINT_GROUP)
    except Exception as e:
        logger.warning(f"Entry point discovery failed: {e}")
        return

    for ep in eps:
        try:
            plugins = ep.load()()

            if not isinstance(plugins, dict):
                logger.error(f"Entry point '{ep.name}' returned {type(plugins)}, expected dict")
                continue

            count = _register_plugin_list(ep.name, plugins)
            logger.debug(f"Loaded {count} plugins from entry point '{ep.name}'")

        except Exception as e:
            logger.error(f"Failed to load entry point '{ep.name}': {e}")

            if _is_strict_mode():
                raise


def discover_plugins(force_refresh: bool = False) -> None:
    """Populate the global plugin index.

    Runs once per process unless force_refresh is set or the registry was
    reset. Called automatically by registries on first use.
    """
    if _state.plugins_discovered and not force_refresh:
        return

    logger.info("Discovering library plugins...")
    _load_builtin_plugins()
    _load_entry_point_plugins()
    _state.plugins_discovered = True

    logger.info(
        "Plugin discovery complete: "
        + ", ".join(f"{len(index)} {kind}s" for kind, index in _state._plugin_index.items())
    )


def reset_registry() -> None:
    """Reset registry to uninitialized state.

    Clears all registered plugins, including ones registered by decorators
    at import time. Primarily used for testing.
    """
    for index in _state._plugin_index.values():
        index.clear()
    _state.plugins_discovered = False
