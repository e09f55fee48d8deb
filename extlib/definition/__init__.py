# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Library definition discovery."""

from ._base import Definition, DefinitionDiscovery
from .chain import ChainDefinitionDiscovery
from .files import DEFINITION_SUFFIXES, FileDefinitionDiscovery
from .memory import InMemoryDefinitionDiscovery

__all__ = [
    "Definition",
    "DefinitionDiscovery",
    "InMemoryDefinitionDiscovery",
    "FileDefinitionDiscovery",
    "ChainDefinitionDiscovery",
    "DEFINITION_SUFFIXES",
]
