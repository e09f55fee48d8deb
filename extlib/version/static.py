# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Version detector for a version fixed in the definition."""

from typing import Optional

from extlib.exceptions import UnknownLibraryVersionError
from extlib.registry import version_detector


@version_detector('static')
class StaticDetector:
    """Sets the configured version."""

    def __init__(self, version: Optional[str] = None):
        self.version = version

    def detect_version(self, library) -> None:
        if not self.version:
            raise UnknownLibraryVersionError(library.id, "No static version configured.")
        library.set_version(str(self.version))
