# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""YAML reading for definitions, info files and the project config.

Everything is parsed with yaml.safe_load; nothing here touches os.environ.
"""

import os
from pathlib import Path
from typing import Any

import yaml


def load_yaml(file_path: str | Path) -> Any:
    """Parse a YAML file as-is. An empty file yields {}.

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the YAML is invalid
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    with open(file_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return {} if data is None else data


def expand_env_vars(data: Any) -> Any:
    """Expand $VAR and ${VAR} in every string of a parsed YAML document.

    Undefined variables are left as written.
    """
    if isinstance(data, str):
        return os.path.expandvars(data)
    if isinstance(data, dict):
        return {key: expand_env_vars(value) for key, value in data.items()}
    if isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    return data
