# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Extension metadata providers.

An extension list enumerates the info records of installed extensions
(modules or themes). An info record may declare the external libraries it
needs under 'library_dependencies'.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol, runtime_checkable

from extlib._internal.io.yaml import load_yaml

logger = logging.getLogger(__name__)

INFO_FILE_SUFFIX = '.info.yml'

InfoRecord = Mapping[str, Any]


@runtime_checkable
class ExtensionList(Protocol):
    """Provides the info records of installed extensions."""

    def get_all_installed_info(self) -> Iterable[InfoRecord]:
        ...


class StaticExtensionList:
    """Extension list over a fixed collection of info records."""

    def __init__(self, infos: Iterable[InfoRecord] = ()):
        self._infos = list(infos)

    def get_all_installed_info(self) -> list[InfoRecord]:
        return list(self._infos)


class InfoFileExtensionList:
    """One info record per '*.info.yml' file found below the given directories.

    Records are read on every call. A record without a 'name' gets the file
    name without its suffix.

    Args:
        directories: Directories searched recursively
        extension_type: 'module' or 'theme', for log messages
    """

    def __init__(self, directories: Iterable[str | Path], extension_type: str = 'module'):
        self.directories = [Path(d) for d in directories]
        self.extension_type = extension_type

    def _info_files(self) -> list[Path]:
        files = []
        for directory in self.directories:
            if not directory.is_dir():
                logger.debug(f"Skipping missing {self.extension_type} directory {directory}")
                continue
            files.extend(sorted(directory.rglob(f'*{INFO_FILE_SUFFIX}')))
        return files

    def get_all_installed_info(self) -> list[InfoRecord]:
        """Parse every info file.

        Raises:
            yaml.YAMLError: If an info file is not valid YAML
        """
        infos = []
        for path in self._info_files():
            info = load_yaml(path)
            if not isinstance(info, dict):
                logger.warning(f"Ignoring {self.extension_type} info file {path}: not a mapping")
                continue
            info.setdefault('name', path.name[:-len(INFO_FILE_SUFFIX)])
            infos.append(info)
        return infos
