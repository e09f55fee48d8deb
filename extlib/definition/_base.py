# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Definition discovery contract."""

from typing import Any, Mapping, Protocol, runtime_checkable

Definition = Mapping[str, Any]


@runtime_checkable
class DefinitionDiscovery(Protocol):
    """Maps a library id to its definition."""

    def has_definition(self, library_id: str) -> bool:
        ...

    def get_definition(self, library_id: str) -> Definition:
        """Get the definition of a library.

        Raises:
            DefinitionNotFoundError: If there is no definition for the id
        """
        ...
