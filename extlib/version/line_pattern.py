# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Detects a library version by scanning a file for a regular expression."""

import logging
import re
from pathlib import Path

from extlib.exceptions import UnknownLibraryVersionError
from extlib.registry import version_detector

logger = logging.getLogger(__name__)


@version_detector('line_pattern')
class LinePatternDetector:
    """Reads the version from a file of the local library copy.

    Only the first ``lines`` lines, each cut to ``columns`` characters, are
    searched. The first group of the first match is the version.

    Args:
        file: File path relative to the library directory
        pattern: Regular expression with one capturing group
        lines: Number of lines to search
        columns: Number of characters per line to search

    Example configuration:
        {'file': 'jquery.js', 'pattern': r'jQuery v(\\d+\\.\\d+\\.\\d+)'}
    """

    def __init__(self, file: str, pattern: str, lines: int = 20, columns: int = 200):
        self.file = file
        self.pattern = re.compile(pattern)
        self.lines = lines
        self.columns = columns

    def detect_version(self, library) -> None:
        """Set the library version.

        Raises:
            UnknownLibraryVersionError: If the library is not installed, the
                file is missing or the pattern does not match
        """
        if not library.is_installed():
            raise UnknownLibraryVersionError(library.id, "The library is not installed.")

        path = Path(library.get_local_path()) / self.file
        if not path.is_file():
            raise UnknownLibraryVersionError(library.id, f"Version file {path} does not exist.")

        with open(path, encoding='utf-8', errors='replace') as f:
            for number, line in enumerate(f):
                if number >= self.lines:
                    break
                match = self.pattern.search(line[:self.columns])
                if match:
                    library.set_version(match.group(1))
                    return

        logger.debug(f"Pattern {self.pattern.pattern!r} not found in first {self.lines} lines of {path}")
        raise UnknownLibraryVersionError(library.id, f"No version found in {path}.")
