# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Definitions stored as one YAML or JSON file per library."""

import json
import logging
from pathlib import Path
from typing import Optional

import yaml

from extlib._internal.io.yaml import load_yaml
from extlib.exceptions import DefinitionNotFoundError, InvalidDefinitionError

from ._base import Definition

logger = logging.getLogger(__name__)

# Checked in this order; the first existing file wins
DEFINITION_SUFFIXES = ('.yml', '.yaml', '.json')


class FileDefinitionDiscovery:
    """Reads '<directory>/<library id>.yml' (or .yaml, .json).

    Args:
        directory: Directory holding the definition files
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _find_file(self, library_id: str) -> Optional[Path]:
        # Ids are plain file names; anything that could leave the directory is unknown
        if not library_id or Path(library_id).name != library_id or library_id in ('.', '..'):
            return None
        for suffix in DEFINITION_SUFFIXES:
            path = self.directory / f"{library_id}{suffix}"
            if path.is_file():
                return path
        return None

    def has_definition(self, library_id: str) -> bool:
        return self._find_file(library_id) is not None

    def get_definition(self, library_id: str) -> Definition:
        """Parse the definition file of a library.

        Raises:
            DefinitionNotFoundError: If no definition file exists
            InvalidDefinitionError: If the file can't be parsed into a mapping
        """
        path = self._find_file(library_id)
        if path is None:
            raise DefinitionNotFoundError(library_id)

        logger.debug(f"Reading definition of {library_id} from {path}")
        try:
            if path.suffix == '.json':
                with open(path, encoding='utf-8') as f:
                    definition = json.load(f)
            else:
                definition = load_yaml(path)
        except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidDefinitionError(
                library_id, f"Invalid library definition {path}: {e}"
            ) from e

        if not isinstance(definition, dict):
            raise InvalidDefinitionError(
                library_id,
                f"Library definition {path} must be a mapping, got {type(definition).__name__}",
            )
        return definition
