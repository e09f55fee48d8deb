# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""File I/O helpers."""

from .yaml import expand_env_vars, load_yaml

__all__ = ["expand_env_vars", "load_yaml"]
