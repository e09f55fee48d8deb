# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Built-in locators."""

from .chain import ChainLocator
from .stream import StreamLocator
from .uri import UriLocator

PLUGIN_KIND = 'locator'
PLUGINS = [StreamLocator, UriLocator, ChainLocator]

__all__ = ["StreamLocator", "UriLocator", "ChainLocator"]
