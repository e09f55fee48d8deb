# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Tries several locators in order."""

from typing import Any, Mapping

from extlib.exceptions import LocatorConfigurationError
from extlib.registry import locator


@locator('chain')
class ChainLocator:
    """First locator reporting the library as installed wins.

    Configuration:
        locators: List of {'id': <locator id>, 'configuration': {...}}
    """

    def __init__(self, locators: list):
        self.locators = list(locators)

    @classmethod
    def create(cls, services: Mapping[str, Any], configuration: Mapping[str, Any], plugin_id: str):
        factory = services.get('locator_factory')
        if factory is None:
            raise LocatorConfigurationError("The 'chain' locator requires a 'locator_factory' service")
        return cls([
            factory.create_instance(entry['id'], entry.get('configuration') or {})
            for entry in configuration.get('locators', [])
        ])

    def add_locator(self, member) -> None:
        self.locators.append(member)

    def locate(self, library) -> None:
        for member in self.locators:
            member.locate(library)
            if library.is_installed():
                return
        library.set_uninstalled()
