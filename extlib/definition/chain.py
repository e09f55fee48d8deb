# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Searches several definition discoveries in order."""

from typing import Iterable

from extlib.exceptions import DefinitionNotFoundError

from ._base import Definition, DefinitionDiscovery


class ChainDefinitionDiscovery:
    """First discovery that has a definition for the id wins."""

    def __init__(self, discoveries: Iterable[DefinitionDiscovery] = ()):
        self.discoveries = list(discoveries)

    def add_discovery(self, discovery: DefinitionDiscovery) -> "ChainDefinitionDiscovery":
        self.discoveries.append(discovery)
        return self

    def has_definition(self, library_id: str) -> bool:
        return any(d.has_definition(library_id) for d in self.discoveries)

    def get_definition(self, library_id: str) -> Definition:
        for discovery in self.discoveries:
            if discovery.has_definition(library_id):
                return discovery.get_definition(library_id)
        raise DefinitionNotFoundError(library_id)
