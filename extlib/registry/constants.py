# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Centralized constants for the plugin registry.

Source Types:
    - Core namespace: 'extlib' - built-in plugins registered on discovery
    - Entry points: discovered via the 'extlib.plugins' entry point group
    - Custom: anything registered at runtime from other modules
"""

# Core namespace reserved for extlib built-in plugins
CORE_NAMESPACE = 'extlib'

SOURCE_CUSTOM = 'custom'

# Python packaging entry point group scanned during discovery
ENTRY_POINT_GROUP = 'extlib.plugins'

# Modules whose PLUGINS lists hold the built-in plugins
BUILTIN_PLUGIN_MODULES = (
    'extlib.types',
    'extlib.locator',
    'extlib.version',
)

# Keys of the dict returned by an entry point function, per plugin kind
ENTRY_POINT_KEYS = {
    'library_type': 'library_types',
    'locator': 'locators',
    'version_detector': 'version_detectors',
}
