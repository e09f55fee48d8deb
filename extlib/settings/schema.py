# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""extlib configuration schema using Pydantic.

Configuration Priority
----------------------
Settings are loaded from multiple sources with the following priority (highest to lowest):
1. Constructor arguments (passed to SystemConfig)
2. Environment variables (EXTLIB_* prefix, nested delimiter '__')
3. Project config file (extlib.yaml)
4. Built-in defaults (Field defaults in SystemConfig)

Path Resolution
---------------
Relative paths resolve to the project directory, which is the directory
holding extlib.yaml, or the current working directory when there is none.
"""

import os
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from extlib._internal.io.yaml import expand_env_vars, load_yaml

_PROJECT_CONFIG_FILE = "extlib.yaml"

# Explicit project file for the SystemConfig currently being built (set by load_config)
explicit_project_file: ContextVar[Path | None] = ContextVar('explicit_project_file', default=None)


def _find_project_config() -> Path | None:
    """Find project configuration file with upward directory walk.

    Search order:
    1. If EXTLIB_PROJECT_DIR is set, check that directory only
    2. Otherwise, walk up from CWD to find extlib.yaml

    Returns:
        Path to config file, or None if not found
    """
    if project_dir_override := os.environ.get("EXTLIB_PROJECT_DIR"):
        candidate = Path(project_dir_override).resolve() / _PROJECT_CONFIG_FILE
        return candidate if candidate.exists() else None

    current = Path.cwd().resolve()
    while current != current.parent:
        candidate = current / _PROJECT_CONFIG_FILE
        if candidate.exists():
            return candidate
        current = current.parent

    return None


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Settings source reading a single project YAML file."""

    def __init__(self, settings_cls: type[BaseSettings], project_file: Path | None = None):
        super().__init__(settings_cls)
        self.project_file_used = None

        if project_file is not None:
            if project_file.is_file():
                self.project_file_used = project_file
        else:
            self.project_file_used = _find_project_config()

        self._data = self._load_yaml_file() if self.project_file_used else {}

    def _load_yaml_file(self) -> dict[str, Any]:
        """Load and env-expand the project file.

        Raises:
            yaml.YAMLError: If the config file has syntax errors
        """
        try:
            data = load_yaml(self.project_file_used)
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            location = f"line {mark.line + 1}, column {mark.column + 1}" if mark else "unknown location"
            raise yaml.YAMLError(
                f"\n\nInvalid YAML in config file: {self.project_file_used}\n"
                f"Error at {location}: {getattr(e, 'problem', None) or str(e)}\n"
            ) from e

        if not isinstance(data, dict):
            raise yaml.YAMLError(f"Config file {self.project_file_used} must contain a mapping")
        return expand_env_vars(data)

    def get_field_value(self, field_name: str, field_info: Any) -> tuple[Any, str, bool]:
        """Get field value from YAML source."""
        if field_name in self._data:
            return self._data[field_name], field_name, True
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from the YAML file."""
        return self._data.copy()


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="warning", description="Console verbosity level: error | warning | info | debug"
    )

    model_config = ConfigDict(extra="forbid")


class SystemConfig(BaseSettings):
    """Configuration schema with hierarchical priority.

    Priority order (highest to lowest):
    1. Constructor arguments
    2. Environment variables (EXTLIB_* prefix)
    3. Project config (extlib.yaml)
    4. Built-in defaults
    """

    definition_dirs: list[Path] = Field(
        default_factory=lambda: [Path("library-definitions")],
        description="Directories searched in order for <id>.yml / <id>.json library definitions",
    )
    streams: dict[str, Path] = Field(
        default_factory=lambda: {
            "asset": Path("assets/vendor"),
            "python_file": Path("libraries"),
        },
        description=(
            "Stream scheme to directory mapping used by the 'stream' locator. "
            "A library is installed locally when <stream dir>/<library id> exists."
        ),
    )
    module_dirs: list[Path] = Field(
        default_factory=list,
        description="Directories scanned for module *.info.yml files",
    )
    theme_dirs: list[Path] = Field(
        default_factory=list,
        description="Directories scanned for theme *.info.yml files",
    )
    plugins_strict: bool = Field(
        default=False,
        description="Re-raise entry point plugin load failures instead of logging them",
    )
    rewrite_asset_paths: bool = Field(
        default=False,
        description=(
            "Prefix relative CSS/JS asset paths with the local library path or the "
            "remote URL. When False asset paths are exposed exactly as defined."
        ),
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )

    model_config = SettingsConfigDict(
        env_prefix="EXTLIB_",
        env_nested_delimiter="__",
        validate_assignment=True,
        extra="allow",
        case_sensitive=False,
        env_file=None,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Constructor args, then EXTLIB_* env vars, then extlib.yaml."""
        return (
            init_settings,
            env_settings,
            YamlSettingsSource(settings_cls, project_file=explicit_project_file.get()),
        )

    def model_post_init(self, __context: Any) -> None:
        """Resolve all configured paths against the project directory."""
        self.project_dir = self._detect_project_root()
        self.definition_dirs = [self._resolve(p) for p in self.definition_dirs]
        self.streams = {scheme: self._resolve(p) for scheme, p in self.streams.items()}
        self.module_dirs = [self._resolve(p) for p in self.module_dirs]
        self.theme_dirs = [self._resolve(p) for p in self.theme_dirs]

    def _detect_project_root(self) -> Path:
        """Directory of the project file in use, else CWD."""
        project_file = explicit_project_file.get()
        if project_file is None:
            project_file = _find_project_config()
        if project_file and Path(project_file).is_file():
            return Path(project_file).resolve().parent
        return Path.cwd().resolve()

    def _resolve(self, path: Path) -> Path:
        path = Path(path)
        return path if path.is_absolute() else (self.project_dir / path).resolve()
