# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""End-to-end library resolution over real definition, asset and info files.

No mocking: the manager is built from settings with the built-in plugins.
"""

import logging

import pytest

from extlib import (
    LibraryManager,
    LibraryNotInstalledError,
    LibraryTypeNotFoundError,
    UnknownLibraryVersionError,
    UnknownTypeHandlerError,
)
from extlib.library import AssetLibrary, MultipleAssetLibrary, PythonFileLibrary


@pytest.fixture
def project(project_dir):
    """Project with an installed jQuery, a remote-only font library and two extensions."""
    definitions = project_dir / 'library-definitions'
    (definitions / 'jquery.yml').write_text(
        "type: asset\n"
        "remote_url: https://code.jquery.com\n"
        "version_detector:\n"
        "  id: line_pattern\n"
        "  configuration:\n"
        "    file: jquery.min.js\n"
        "    pattern: 'jQuery v(\\d+\\.\\d+\\.\\d+)'\n"
        "js:\n"
        "  jquery.min.js: {minified: true}\n"
    )
    (definitions / 'fonts.json').write_text(
        '{"type": "asset", "remote_url": "https://fonts.example.com", '
        '"css": {"theme": {"fonts.css": {}}}}'
    )
    (definitions / 'local_only.yml').write_text("type: asset\njs:\n  a.js: {}\n")
    (definitions / 'bootstrap.yml').write_text(
        "type: asset_multiple\n"
        "version_detector: {id: static, configuration: {version: '5.3.2'}}\n"
        "libraries:\n"
        "  grid:\n"
        "    css: {layout: {css/grid.css: {}}}\n"
        "  modal:\n"
        "    js: {js/modal.js: {}}\n"
    )
    (definitions / 'helpers.yml').write_text("type: python_file\nfiles: [helpers.py]\n")
    (definitions / 'untyped.yml').write_text("version: '1.0'\n")
    (definitions / 'exotic.yml').write_text("type: exotic\n")

    jquery_dir = project_dir / 'assets' / 'jquery'
    jquery_dir.mkdir()
    (jquery_dir / 'jquery.min.js').write_text("/*! jQuery v3.7.1 | (c) OpenJS Foundation */\n")
    (project_dir / 'assets' / 'bootstrap').mkdir()

    helpers_dir = project_dir / 'libraries' / 'helpers'
    helpers_dir.mkdir()
    (helpers_dir / 'helpers.py').write_text(
        f"with open({str(project_dir / 'loaded.txt')!r}, 'a') as f:\n"
        f"    f.write('helpers\\n')\n"
    )

    (project_dir / 'modules' / 'blog').mkdir()
    (project_dir / 'modules' / 'blog' / 'blog.info.yml').write_text(
        "name: Blog\nlibrary_dependencies: [jquery, highlight]\n"
    )
    (project_dir / 'themes' / 'olivero.info.yml').write_text(
        "name: Olivero\nlibrary_dependencies: [jquery, fonts]\n"
    )
    return project_dir


@pytest.fixture
def manager(project, config):
    return LibraryManager.from_config(config)


class TestAssetLibraries:

    def test_installed_library_with_detected_version(self, manager, project):
        library = manager.get_library('jquery')

        assert isinstance(library, AssetLibrary)
        assert library.is_installed()
        assert library.get_local_path() == str(project / 'assets' / 'jquery')
        assert library.version == '3.7.1'
        assert library.get_attachable_asset_library() == {
            'version': '3.7.1',
            'css': {},
            'js': {'jquery.min.js': {'minified': True}},
            'dependencies': [],
        }

    def test_remote_only_library(self, manager):
        library = manager.get_library('fonts')

        assert not library.is_installed()
        assert library.can_be_attached()
        assert library.get_css_assets() == {'theme': {'fonts.css': {}}}

    def test_unattachable_library(self, manager):
        library = manager.get_library('local_only')

        assert not library.can_be_attached()
        assert library.get_js_assets() == {'a.js': {}}
        with pytest.raises(LibraryNotInstalledError):
            library.get_attachable_asset_library()

    def test_multiple_asset_library(self, manager):
        library = manager.get_library('bootstrap')

        assert isinstance(library, MultipleAssetLibrary)
        assert library.version == '5.3.2'
        assert sorted(library.get_attachable_asset_libraries()) == [
            'bootstrap.grid', 'bootstrap.modal'
        ]

    def test_version_file_missing(self, manager, project):
        (project / 'assets' / 'jquery' / 'jquery.min.js').unlink()

        with pytest.raises(UnknownLibraryVersionError):
            manager.get_library('jquery')

    def test_load_asset_library_is_noop(self, manager, caplog):
        with caplog.at_level(logging.WARNING, logger='extlib.manager'):
            manager.load('jquery')

        assert "Library 'jquery' was not loaded" in caplog.text

    def test_asset_paths_rewritten_when_enabled(self, project, config):
        config.rewrite_asset_paths = True
        manager = LibraryManager.from_config(config)

        assert manager.get_library('jquery').get_js_assets() == {
            str(project / 'assets' / 'jquery' / 'jquery.min.js'): {'minified': True}
        }
        assert manager.get_library('fonts').get_css_assets() == {
            'theme': {'https://fonts.example.com/fonts.css': {}}
        }


class TestPythonFileLibraries:

    def test_load_imports_once(self, manager, project):
        assert isinstance(manager.get_library('helpers'), PythonFileLibrary)

        manager.load('helpers')
        manager.load('helpers')

        assert (project / 'loaded.txt').read_text() == 'helpers\n'

    def test_get_library_does_not_import(self, manager, project):
        manager.get_library('helpers')

        assert not (project / 'loaded.txt').exists()

    def test_load_not_installed(self, manager, project):
        (project / 'libraries' / 'helpers' / 'helpers.py').unlink()
        (project / 'libraries' / 'helpers').rmdir()

        with pytest.raises(LibraryNotInstalledError):
            manager.load('helpers')


class TestErrors:

    def test_untyped_definition(self, manager):
        with pytest.raises(LibraryTypeNotFoundError):
            manager.get_library('untyped')

    def test_unknown_type(self, manager):
        with pytest.raises(UnknownTypeHandlerError):
            manager.load('exotic')


def test_required_library_ids(manager):
    assert manager.get_required_library_ids() == {'jquery', 'highlight', 'fonts'}
