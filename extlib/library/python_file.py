# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Libraries of Python source files that are imported on load."""

import os
from types import MappingProxyType
from typing import Any, Mapping

from extlib.exceptions import LibraryNotInstalledError

from .base import LocalLibrary, _list_field


class PythonFileLibrary(LocalLibrary):
    """Local-only library of Python files.

    The definition's 'files' entry lists paths relative to the library's
    local directory, found through the 'python_file' stream.
    """

    LOCATOR_CONFIGURATION = MappingProxyType({'scheme': 'python_file'})

    def __init__(self, library_id: str, definition: Mapping[str, Any], library_type):
        super().__init__(library_id, definition, library_type)
        self.files: list[str] = _list_field(library_id, definition, 'files')

    def get_python_files(self) -> list[str]:
        """Absolute paths of the library's Python files.

        Raises:
            LibraryNotInstalledError: If the library is not installed locally
        """
        if not self.is_installed():
            raise LibraryNotInstalledError(self.id)
        local_path = self.get_local_path()
        return [os.path.join(local_path, file) for file in self.files]
