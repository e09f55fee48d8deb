# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Configuration loading and management for extlib."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional
from unittest.mock import patch

from pydantic import ValidationError
from rich.console import Console

from .schema import SystemConfig, explicit_project_file

console = Console(stderr=True)


def load_config(
    project_file: Optional[Path] = None,
    **overrides
) -> SystemConfig:
    """Load configuration with hierarchical priority.

    Priority order (highest to lowest):
    1. Keyword overrides
    2. Environment variables (EXTLIB_* prefix)
    3. Project config file (extlib.yaml)
    4. Built-in defaults

    EXTLIB_LOG_LEVEL is a shorthand for EXTLIB_LOGGING__LEVEL.

    Args:
        project_file: Path to project config file (for non-standard locations)
        **overrides: Field overrides

    Returns:
        SystemConfig object
    """
    if 'logging' not in overrides and 'EXTLIB_LOG_LEVEL' in os.environ:
        overrides['logging'] = {'level': os.environ['EXTLIB_LOG_LEVEL']}

    token = explicit_project_file.set(Path(project_file) if project_file else None)
    try:
        return SystemConfig(**overrides)
    except ValidationError as e:
        console.print("[bold red]Configuration validation failed:[/bold red]")
        for error in e.errors():
            field = " → ".join(str(x) for x in error["loc"])
            console.print(f"  [red]{field}: {error['msg']}[/red]")
        raise
    finally:
        explicit_project_file.reset(token)


@lru_cache(maxsize=1)
def get_config() -> SystemConfig:
    """Get cached configuration instance."""
    return load_config()


def reset_config() -> None:
    """Reset the cached configuration (mainly for testing)."""
    get_config.cache_clear()


def get_default_config() -> SystemConfig:
    """Get a configuration instance with only default values (no files or env vars)."""
    filtered_env = {
        k: v for k, v in os.environ.items()
        if not k.startswith('EXTLIB_')
    }

    with patch.dict(os.environ, filtered_env, clear=True):
        return load_config(project_file=Path('/dev/null'))
