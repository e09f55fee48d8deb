# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Tests for configuration loading."""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from extlib.settings import SystemConfig, get_config, get_default_config, load_config, reset_config


@pytest.fixture
def clean_env(monkeypatch):
    """Remove EXTLIB_* variables from the environment."""
    for key in list(os.environ):
        if key.startswith('EXTLIB_'):
            monkeypatch.delenv(key)


def write_project(directory: Path, content: str) -> Path:
    project_file = directory / 'extlib.yaml'
    project_file.write_text(content)
    return project_file


class TestDefaults:

    def test_default_values(self, clean_env, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = get_default_config()

        assert isinstance(config, SystemConfig)
        assert config.project_dir == tmp_path.resolve()
        assert config.definition_dirs == [tmp_path.resolve() / 'library-definitions']
        assert config.streams == {
            'asset': tmp_path.resolve() / 'assets' / 'vendor',
            'python_file': tmp_path.resolve() / 'libraries',
        }
        assert config.module_dirs == []
        assert config.plugins_strict is False
        assert config.rewrite_asset_paths is False
        assert config.logging.level == 'warning'


class TestProjectFile:

    def test_values_from_yaml(self, clean_env, tmp_path):
        project_file = write_project(
            tmp_path,
            "definition_dirs: [defs, /opt/shared/defs]\n"
            "streams:\n"
            "  asset: web/libraries\n"
            "rewrite_asset_paths: true\n"
            "logging:\n"
            "  level: debug\n",
        )

        config = load_config(project_file=project_file)

        assert config.project_dir == tmp_path.resolve()
        assert config.definition_dirs == [tmp_path.resolve() / 'defs', Path('/opt/shared/defs')]
        assert config.streams == {'asset': tmp_path.resolve() / 'web' / 'libraries'}
        assert config.rewrite_asset_paths is True
        assert config.logging.level == 'debug'

    def test_found_by_project_dir_env(self, clean_env, tmp_path, monkeypatch):
        write_project(tmp_path, "plugins_strict: true\n")
        monkeypatch.setenv('EXTLIB_PROJECT_DIR', str(tmp_path))

        assert load_config().plugins_strict is True

    def test_found_by_walking_up(self, clean_env, tmp_path, monkeypatch):
        write_project(tmp_path, "plugins_strict: true\n")
        nested = tmp_path / 'a' / 'b'
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        config = load_config()

        assert config.plugins_strict is True
        assert config.project_dir == tmp_path.resolve()

    def test_env_vars_expanded(self, clean_env, tmp_path, monkeypatch):
        monkeypatch.setenv('VENDOR_DIR', '/srv/vendor')
        project_file = write_project(tmp_path, "streams:\n  asset: ${VENDOR_DIR}/assets\n")

        config = load_config(project_file=project_file)

        assert config.streams['asset'] == Path('/srv/vendor/assets')

    def test_unknown_logging_key_rejected(self, clean_env, tmp_path):
        project_file = write_project(tmp_path, "logging:\n  colour: true\n")

        with pytest.raises(ValidationError):
            load_config(project_file=project_file)


class TestPriority:

    def test_env_overrides_yaml(self, clean_env, tmp_path, monkeypatch):
        project_file = write_project(tmp_path, "rewrite_asset_paths: false\n")
        monkeypatch.setenv('EXTLIB_REWRITE_ASSET_PATHS', 'true')

        assert load_config(project_file=project_file).rewrite_asset_paths is True

    def test_nested_env(self, clean_env, tmp_path, monkeypatch):
        monkeypatch.setenv('EXTLIB_LOGGING__LEVEL', 'info')

        assert load_config(project_file=tmp_path / 'none.yaml').logging.level == 'info'

    def test_log_level_shorthand(self, clean_env, tmp_path, monkeypatch):
        monkeypatch.setenv('EXTLIB_LOG_LEVEL', 'error')

        assert load_config(project_file=tmp_path / 'none.yaml').logging.level == 'error'

    def test_overrides_win(self, clean_env, tmp_path, monkeypatch):
        project_file = write_project(tmp_path, "plugins_strict: false\n")
        monkeypatch.setenv('EXTLIB_PLUGINS_STRICT', 'false')

        assert load_config(project_file=project_file, plugins_strict=True).plugins_strict is True


class TestCaching:

    def test_get_config_cached_until_reset(self, clean_env, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        first = get_config()
        assert get_config() is first

        reset_config()
        assert get_config() is not first
