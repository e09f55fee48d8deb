# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Shared runtime state for the plugin registry.

Holds the mutable global index shared by the decorators, discovery and the
registry factories. Kept apart to avoid circular imports.
"""

from ._metadata import PluginKind, PluginMetadata

# Global plugin index: kind -> plugin id -> metadata
_plugin_index: dict[PluginKind, dict[str, PluginMetadata]] = {kind: {} for kind in PluginKind}

# Discovery state - read and written through the module, never imported by name
plugins_discovered = False
