# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Library type for libraries of Python files, imported when loaded."""

import importlib.util
import logging
import re
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Mapping

from extlib.library import PythonFileLibrary
from extlib.registry import library_type

from .base import LibraryType

logger = logging.getLogger(__name__)

MODULE_PREFIX = 'extlib_libraries'


class PythonFileLoader:
    """Imports Python files by path, each file at most once.

    Modules are registered in sys.modules as
    'extlib_libraries.<library id>.<path>', where <path> is the file's path
    below the library directory without its suffix, dotted ('a/util.py' ->
    'a.util'). Non-identifier characters are replaced by '_'.
    """

    def __init__(self):
        self._loaded: dict[Path, ModuleType] = {}

    def is_loaded(self, path: str | Path) -> bool:
        return Path(path).resolve() in self._loaded

    def load(self, path: str | Path, library_id: str, base: str | Path | None = None) -> ModuleType:
        """Import a file, returning the existing module when already imported.

        Args:
            path: Python file to import
            library_id: Library the file belongs to
            base: Library directory the module name is relative to
                (default: the file's directory)

        Raises:
            ImportError: If no module spec can be created for the file
        """
        path = Path(path).resolve()
        if path in self._loaded:
            return self._loaded[path]

        module_name = self.module_name(library_id, path, base)
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot import {path} for library '{library_id}'")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            del sys.modules[module_name]
            raise

        self._loaded[path] = module
        logger.debug(f"Imported {path} as {module_name}")
        return module

    @staticmethod
    def module_name(library_id: str, path: str | Path, base: str | Path | None = None) -> str:
        def clean(part: str) -> str:
            return re.sub(r'\W', '_', part)

        path = Path(path)
        relative = Path(path.name)
        if base is not None:
            try:
                relative = path.resolve().relative_to(Path(base).resolve())
            except ValueError:
                pass
        parts = [*relative.parent.parts, relative.stem]
        return ".".join([MODULE_PREFIX, clean(library_id), *(clean(p) for p in parts)])


# Process-wide loader, used unless a 'python_file_loader' service is given
default_loader = PythonFileLoader()


@library_type('python_file')
class PythonFileLibraryType(LibraryType):
    """Locates python file libraries on creation and imports their files on load."""

    def __init__(self, *args, loader: PythonFileLoader | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.loader = loader or default_loader

    @classmethod
    def create(cls, services: Mapping[str, Any], configuration: Mapping[str, Any], plugin_id: str):
        return cls(
            locator_factory=services.get('locator_factory'),
            version_detector_factory=services.get('version_detector_factory'),
            config=services.get('config'),
            loader=services.get('python_file_loader'),
        )

    def get_library_class(self) -> type:
        return PythonFileLibrary

    def on_library_create(self, library) -> None:
        self.locate(library)
        self.detect_version(library)

    def on_library_load(self, library) -> None:
        """Import every file of the library.

        Raises:
            LibraryNotInstalledError: If the library is not installed locally
        """
        for file in library.get_python_files():
            self.loader.load(file, library.id, base=library.get_local_path())
