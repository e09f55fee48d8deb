# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Locates a library at a fixed directory."""

from pathlib import Path

from extlib.registry import locator


@locator('uri')
class UriLocator:
    """A library is installed if the configured directory exists."""

    def __init__(self, uri: str):
        self.uri = uri

    def locate(self, library) -> None:
        if Path(self.uri).is_dir():
            library.set_local_path(self.uri)
        else:
            library.set_uninstalled()
