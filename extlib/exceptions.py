# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Exception hierarchy for external library resolution.

The library manager performs no local recovery: every error below surfaces
unchanged to whoever called get_library() or load().
"""


class LibraryError(Exception):
    """Base exception for all external library errors."""
    pass


# ============================================================================
# Definition Errors
# ============================================================================

class DefinitionNotFoundError(LibraryError):
    """Raised when no definition exists for a library id.

    Attributes:
        library_id: The id that could not be found
    """

    def __init__(self, library_id: str, message: str | None = None):
        self.library_id = library_id
        super().__init__(message or f"Library definition for '{library_id}' not found.")


class InvalidDefinitionError(LibraryError):
    """Raised when a definition file exists but cannot be parsed."""

    def __init__(self, library_id: str, message: str):
        self.library_id = library_id
        super().__init__(message)


class LibraryTypeNotFoundError(LibraryError):
    """Raised when a library definition has no 'type' entry."""

    def __init__(self, library_id: str):
        self.library_id = library_id
        super().__init__(f"Library type for library '{library_id}' not specified.")


# ============================================================================
# Plugin Errors
# ============================================================================

class PluginError(LibraryError):
    """Base exception for plugin registry errors."""
    pass


class UnknownPluginError(PluginError):
    """Raised when a plugin id is not registered for a plugin kind.

    Attributes:
        kind: Plugin kind ('library_type', 'locator', 'version_detector')
        plugin_id: Requested plugin id
    """

    def __init__(self, kind: str, plugin_id: str, available: list[str] | None = None):
        self.kind = kind
        self.plugin_id = plugin_id
        message = f"The '{plugin_id}' {kind.replace('_', ' ')} plugin does not exist."
        if available:
            message += f" Available: {', '.join(available)}"
        super().__init__(message)


class UnknownTypeHandlerError(UnknownPluginError):
    """Raised when a definition names a library type that is not registered."""
    pass


class PluginRegistrationError(PluginError):
    """Raised when a plugin fails validation at registration time."""
    pass


# ============================================================================
# Library Errors
# ============================================================================

class LibraryConstructionError(LibraryError):
    """Raised when a library cannot be built from its definition."""

    def __init__(self, library_id: str, message: str):
        self.library_id = library_id
        super().__init__(f"Cannot create library '{library_id}': {message}")


class LibraryNotInstalledError(LibraryError):
    """Raised when a local-only operation is used on a library that is not installed."""

    def __init__(self, library_id: str):
        self.library_id = library_id
        super().__init__(f"The library '{library_id}' is not installed.")


class UnknownLibraryVersionError(LibraryError):
    """Raised when the version of a library cannot be detected."""

    def __init__(self, library_id: str, reason: str | None = None):
        self.library_id = library_id
        message = f"The version of library '{library_id}' could not be detected."
        if reason:
            message += f" {reason}"
        super().__init__(message)


class LocatorConfigurationError(LibraryError):
    """Raised when a locator is configured with an unknown stream scheme."""
    pass
