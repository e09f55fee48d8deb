# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Locates libraries below a configured stream directory."""

import logging
from pathlib import Path
from typing import Any, Mapping

from extlib.exceptions import LocatorConfigurationError
from extlib.registry import locator

logger = logging.getLogger(__name__)


@locator('stream')
class StreamLocator:
    """A library is installed if '<stream directory>/<library id>' is a directory.

    Stream directories come from the 'streams' setting, keyed by scheme
    (e.g. 'asset', 'python_file').

    Args:
        scheme: Stream scheme
        streams: Scheme to directory mapping
    """

    def __init__(self, scheme: str, streams: Mapping[str, Path]):
        self.scheme = scheme
        self.streams = dict(streams)

    @classmethod
    def create(cls, services: Mapping[str, Any], configuration: Mapping[str, Any], plugin_id: str):
        if 'scheme' not in configuration:
            raise LocatorConfigurationError(f"The '{plugin_id}' locator requires a 'scheme'")
        config = services.get('config')
        streams = configuration.get('streams') or (config.streams if config is not None else {})
        return cls(configuration['scheme'], streams)

    def get_directory(self) -> Path:
        """Directory the scheme points to.

        Raises:
            LocatorConfigurationError: If the scheme has no directory
        """
        if self.scheme not in self.streams:
            raise LocatorConfigurationError(
                f"Unknown stream scheme '{self.scheme}'. Configured: {', '.join(sorted(self.streams)) or 'none'}"
            )
        return Path(self.streams[self.scheme])

    def locate(self, library) -> None:
        path = self.get_directory() / library.id
        if path.is_dir():
            library.set_local_path(str(path))
        else:
            logger.debug(f"{library.id} not found at {self.scheme}://{library.id} ({path})")
            library.set_uninstalled()
