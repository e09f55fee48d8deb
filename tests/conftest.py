"""Global pytest configuration and fixtures."""

import logging
import os

import pytest

from extlib.registry import reset_registry
from extlib.settings import load_config, reset_config
from tests.fixtures.libraries import RecordingLibrary, make_type_factory


@pytest.fixture(autouse=True)
def isolated_registry():
    """Start every test with an empty, undiscovered plugin registry."""
    reset_registry()
    reset_config()
    RecordingLibrary.instances.clear()
    yield
    reset_registry()
    reset_config()
    clear_extlib_logging()


@pytest.fixture
def type_factory():
    """Recording factory over an isolated registry of fake library types."""
    return make_type_factory()


@pytest.fixture
def project_dir(tmp_path):
    """Project directory with the standard extlib layout."""
    for name in ('library-definitions', 'assets', 'libraries', 'modules', 'themes'):
        (tmp_path / name).mkdir()
    return tmp_path


@pytest.fixture
def config(project_dir, monkeypatch):
    """SystemConfig pointing at project_dir, ignoring the caller's environment."""
    for key in list(os.environ):
        if key.startswith('EXTLIB_'):
            monkeypatch.delenv(key)
    return load_config(
        project_file=project_dir / 'extlib.yaml',
        definition_dirs=[project_dir / 'library-definitions'],
        streams={
            'asset': project_dir / 'assets',
            'python_file': project_dir / 'libraries',
        },
        module_dirs=[project_dir / 'modules'],
        theme_dirs=[project_dir / 'themes'],
    )


def clear_extlib_logging():
    logger = logging.getLogger('extlib')
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def clean_logging():
    """Reset the extlib logger for test isolation."""
    clear_extlib_logging()
    yield
    clear_extlib_logging()
