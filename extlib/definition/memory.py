# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Definitions held in memory."""

from typing import Mapping, Optional

from extlib.exceptions import DefinitionNotFoundError

from ._base import Definition


class InMemoryDefinitionDiscovery:
    """Definition discovery over a dict of definitions."""

    def __init__(self, definitions: Optional[Mapping[str, Definition]] = None):
        self._definitions: dict[str, Definition] = dict(definitions or {})

    def has_definition(self, library_id: str) -> bool:
        return library_id in self._definitions

    def get_definition(self, library_id: str) -> Definition:
        try:
            return self._definitions[library_id]
        except KeyError:
            raise DefinitionNotFoundError(library_id) from None

    def write_definition(self, library_id: str, definition: Definition) -> None:
        self._definitions[library_id] = definition
