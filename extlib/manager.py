# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""External library manager.

Resolves a library id to a Library:

    definition lookup -> library type (by the definition's 'type')
    -> library class -> Library.create(id, definition, library_type)
    -> creation hook (if the type has one)

Nothing is cached; every call resolves from scratch. Errors from the
definition discovery, the library type factory, library construction or a
lifecycle hook propagate unchanged.

Logging Strategy:
    - DEBUG: Each resolution
    - WARNING: load() of a library whose type has no load hook, and
      library_dependencies that are not a list
"""

import logging
from typing import Any, Mapping

from .definition import DefinitionDiscovery
from .exceptions import LibraryTypeNotFoundError
from .extensions import ExtensionList
from .registry import LifecycleHooks

logger = logging.getLogger(__name__)


class LibraryManager:
    """Provides a manager for external libraries.

    Args:
        definition_discovery: Library id -> definition lookup
        library_type_factory: Library type factory (create_instance(type_name))
        module_extension_list: Info records of installed modules
        theme_extension_list: Info records of installed themes
    """

    def __init__(
        self,
        definition_discovery: DefinitionDiscovery,
        library_type_factory,
        module_extension_list: ExtensionList,
        theme_extension_list: ExtensionList,
    ):
        self.definition_discovery = definition_discovery
        self.library_type_factory = library_type_factory
        self.module_extension_list = module_extension_list
        self.theme_extension_list = theme_extension_list

    @classmethod
    def from_config(cls, config=None) -> "LibraryManager":
        """Build a manager wired from settings.

        Definitions are read from config.definition_dirs (in order), plugins
        come from the global registry and extension info files from
        config.module_dirs / config.theme_dirs. Console logging is set to
        config.logging.level.
        """
        from ._internal.logging import setup_logging
        from .definition import ChainDefinitionDiscovery, FileDefinitionDiscovery
        from .extensions import InfoFileExtensionList
        from .registry import create_default_registries

        if config is None:
            from .settings import get_config
            config = get_config()

        setup_logging(config.logging.level)
        registries = create_default_registries(config)
        return cls(
            ChainDefinitionDiscovery(FileDefinitionDiscovery(d) for d in config.definition_dirs),
            registries['library_type_factory'],
            InfoFileExtensionList(config.module_dirs, 'module'),
            InfoFileExtensionList(config.theme_dirs, 'theme'),
        )

    def get_library(self, library_id: str):
        """Get a library by its id.

        Raises:
            DefinitionNotFoundError: If there is no definition for the id
            LibraryTypeNotFoundError: If the definition has no 'type'
            UnknownTypeHandlerError: If the type is not registered
        """
        definition = self.definition_discovery.get_definition(library_id)
        library_type = self._get_library_type(library_id, definition)
        return self._create_library(library_id, definition, library_type)

    def get_required_library_ids(self) -> set[str]:
        """Ids of all libraries required by installed modules and themes."""
        library_ids: set[str] = set()
        for extension_list in (self.module_extension_list, self.theme_extension_list):
            for info in extension_list.get_all_installed_info():
                dependencies = info.get('library_dependencies')
                if not dependencies:
                    continue
                if not isinstance(dependencies, (list, tuple, set)):
                    logger.warning(
                        f"Ignoring library_dependencies of '{info.get('name', '?')}': "
                        f"expected a list, got {type(dependencies).__name__}"
                    )
                    continue
                library_ids.update(dependencies)
        return library_ids

    def load(self, library_id: str) -> None:
        """Load a library into the current process.

        Libraries whose type has no load hook are not loaded; this is
        logged and otherwise ignored.

        Raises:
            Same errors as get_library(), plus anything the load hook raises
        """
        definition = self.definition_discovery.get_definition(library_id)
        library_type = self._get_library_type(library_id, definition)

        if not LifecycleHooks.of(library_type).on_load:
            logger.warning(
                f"Library '{library_id}' was not loaded: library type "
                f"'{definition['type']}' does not support loading."
            )
            return

        library = self._create_library(library_id, definition, library_type)
        logger.debug(f"Loading library {library_id}")
        library_type.on_library_load(library)

    def _create_library(self, library_id: str, definition: Mapping[str, Any], library_type):
        library_class = library_type.get_library_class()
        library = library_class.create(library_id, definition, library_type)

        if LifecycleHooks.of(library_type).on_create:
            library_type.on_library_create(library)
        return library

    def _get_library_type(self, library_id: str, definition: Mapping[str, Any]):
        if definition.get('type') is None:
            raise LibraryTypeNotFoundError(library_id)
        logger.debug(f"Resolving library {library_id} (type '{definition['type']}')")
        return self.library_type_factory.create_instance(definition['type'])
