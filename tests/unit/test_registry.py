# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Tests for plugin registration, discovery and plugin factories."""

import pytest

from extlib import PluginRegistrationError, UnknownPluginError, UnknownTypeHandlerError
from extlib.registry import (
    LifecycleHooks,
    PluginKind,
    PluginRegistry,
    create_default_registries,
    discover_plugins,
    is_initialized,
    library_type,
    locator,
    register_plugin,
    reset_registry,
)
from extlib.types import (
    AssetLibraryType,
    LibraryCreationListener,
    LibraryLoadingListener,
    LibraryType,
    PythonFileLibraryType,
)
from tests.fixtures.libraries import (
    CreatingLoadingType,
    CreatingType,
    DuckTypedHandler,
    LoadingType,
    PlainType,
)


class DummyLocator:
    def __init__(self, root='/'):
        self.root = root

    def locate(self, library):
        library.set_local_path(self.root)


# ============================================================================
# Metadata
# ============================================================================

class TestPluginKind:

    def test_from_string(self):
        assert PluginKind.from_string('Locator') is PluginKind.LOCATOR

    def test_from_string_invalid(self):
        with pytest.raises(ValueError, match="Invalid plugin kind"):
            PluginKind.from_string('theme')


class TestLifecycleHooks:
    """Hooks are stamped at registration, or read off unregistered handler classes."""

    def test_hooks_from_class(self):
        assert LifecycleHooks.from_class(PlainType) == LifecycleHooks()
        assert LifecycleHooks.from_class(LoadingType) == LifecycleHooks(on_load=True)
        assert LifecycleHooks.from_class(CreatingLoadingType) == LifecycleHooks(True, True)

    def test_builtin_types(self):
        assert LifecycleHooks.from_class(AssetLibraryType) == LifecycleHooks(on_create=True)
        assert LifecycleHooks.from_class(PythonFileLibraryType) == LifecycleHooks(True, True)

    def test_base_class_has_no_hooks(self):
        assert LifecycleHooks.from_class(LibraryType) == LifecycleHooks()

    def test_registration_stamps_hooks(self):
        registry = PluginRegistry(PluginKind.LIBRARY_TYPE, isolated=True)

        meta = registry.register('loading', LoadingType)

        assert meta.lifecycle_hooks == LifecycleHooks(on_load=True)
        assert LoadingType.lifecycle_hooks == LifecycleHooks(on_load=True)

    def test_listener_protocols(self):
        assert isinstance(CreatingLoadingType(), LibraryCreationListener)
        assert isinstance(CreatingLoadingType(), LibraryLoadingListener)
        assert not isinstance(PlainType(), LibraryCreationListener)
        assert isinstance(DuckTypedHandler(), LibraryCreationListener)

    def test_hooks_of_registered_handler_use_stamp(self):
        registry = PluginRegistry(PluginKind.LIBRARY_TYPE, isolated=True)
        meta = registry.register('creating', CreatingType)

        assert LifecycleHooks.of(registry.create_instance('creating')) is meta.lifecycle_hooks

    def test_hooks_of_unregistered_handlers(self):
        class LateLoadingType(CreatingType):
            def on_library_load(self, library):
                pass

        PluginRegistry(PluginKind.LIBRARY_TYPE, isolated=True).register('creating', CreatingType)

        assert LifecycleHooks.of(LateLoadingType()) == LifecycleHooks(True, True)
        assert LifecycleHooks.of(DuckTypedHandler()) == LifecycleHooks(on_create=True)
        assert LifecycleHooks.of(object()) == LifecycleHooks()


# ============================================================================
# Registration
# ============================================================================

class TestRegistration:

    def test_decorator_registers_and_sets_id(self):
        @locator('dummy')
        class Dummy(DummyLocator):
            pass

        registry = PluginRegistry(PluginKind.LOCATOR)

        assert Dummy.plugin_id == 'dummy'
        assert registry.has_plugin('dummy')
        assert registry.get_metadata('dummy').source == 'custom'
        assert registry.get_metadata('dummy').full_name == 'custom:dummy'

    def test_library_type_must_be_class(self):
        class Handler:
            def get_library_class(self):
                return object

        with pytest.raises(PluginRegistrationError, match="must be a class"):
            register_plugin('library_type', 'instance', Handler())

    def test_missing_required_method(self):
        with pytest.raises(PluginRegistrationError, match="must implement get_library_class"):
            @library_type('broken')
            class Broken:
                pass

    def test_empty_id_rejected(self):
        with pytest.raises(PluginRegistrationError):
            register_plugin(PluginKind.LOCATOR, '', DummyLocator)

    def test_same_factory_twice_is_noop(self):
        first = register_plugin(PluginKind.LOCATOR, 'dummy', DummyLocator)
        second = register_plugin(PluginKind.LOCATOR, 'dummy', DummyLocator)

        assert first is second

    def test_conflicting_factory_rejected(self):
        register_plugin(PluginKind.LOCATOR, 'dummy', DummyLocator)

        class OtherLocator(DummyLocator):
            pass

        with pytest.raises(PluginRegistrationError, match="already registered"):
            register_plugin(PluginKind.LOCATOR, 'dummy', OtherLocator)


# ============================================================================
# Discovery
# ============================================================================

class TestDiscovery:

    def test_builtin_plugins_discovered(self):
        assert not is_initialized()

        discover_plugins()

        assert is_initialized()
        assert PluginRegistry(PluginKind.LIBRARY_TYPE).list_plugins() == [
            'asset', 'asset_multiple', 'python_file'
        ]
        assert PluginRegistry(PluginKind.LOCATOR).list_plugins() == ['chain', 'stream', 'uri']
        assert PluginRegistry(PluginKind.VERSION_DETECTOR).list_plugins() == [
            'line_pattern', 'static'
        ]

    def test_builtin_source(self):
        meta = PluginRegistry(PluginKind.LIBRARY_TYPE).get_metadata('asset')

        assert meta.full_name == 'extlib:asset'
        assert meta.factory is AssetLibraryType

    def test_reset_clears_everything(self):
        discover_plugins()
        reset_registry()

        assert not is_initialized()
        registry = PluginRegistry(PluginKind.LOCATOR)
        # First use rediscovers the built-in plugins
        assert registry.has_plugin('stream')

    def test_entry_point_plugins(self, monkeypatch):
        class FakeEntryPoint:
            name = 'acme'

            def load(self):
                return lambda: {'locators': [DummyLocator]}

        DummyLocator.plugin_id = 'acme_locator'
        monkeypatch.setattr(
            'extlib.registry._discovery.entry_points', lambda group: [FakeEntryPoint()]
        )
        try:
            discover_plugins(force_refresh=True)
            meta = PluginRegistry(PluginKind.LOCATOR).get_metadata('acme_locator')
        finally:
            del DummyLocator.plugin_id

        assert meta.source == 'acme'
        assert meta.full_name == 'acme:acme_locator'

    def test_broken_entry_point_logged(self, monkeypatch, caplog):
        class BrokenEntryPoint:
            name = 'broken'

            def load(self):
                raise ImportError("no module named acme")

        monkeypatch.setattr(
            'extlib.registry._discovery.entry_points', lambda group: [BrokenEntryPoint()]
        )
        monkeypatch.setattr('extlib.registry._discovery._is_strict_mode', lambda: False)

        discover_plugins(force_refresh=True)

        assert "Failed to load entry point 'broken'" in caplog.text
        assert PluginRegistry(PluginKind.LOCATOR).has_plugin('stream')

    def test_broken_entry_point_strict(self, monkeypatch):
        class BrokenEntryPoint:
            name = 'broken'

            def load(self):
                raise ImportError("no module named acme")

        monkeypatch.setattr(
            'extlib.registry._discovery.entry_points', lambda group: [BrokenEntryPoint()]
        )
        monkeypatch.setattr('extlib.registry._discovery._is_strict_mode', lambda: True)

        with pytest.raises(ImportError):
            discover_plugins(force_refresh=True)


# ============================================================================
# Plugin factories
# ============================================================================

class TestPluginRegistry:

    def test_unknown_library_type(self):
        registry = PluginRegistry(PluginKind.LIBRARY_TYPE)

        with pytest.raises(UnknownTypeHandlerError) as exc_info:
            registry.create_instance('nonexistent')

        assert exc_info.value.kind == 'library_type'
        assert 'Available: asset' in str(exc_info.value)

    def test_unknown_locator_is_not_type_error(self):
        registry = PluginRegistry(PluginKind.LOCATOR)

        with pytest.raises(UnknownPluginError) as exc_info:
            registry.create_instance('nonexistent')

        assert not isinstance(exc_info.value, UnknownTypeHandlerError)

    def test_plain_factory_called_with_configuration(self):
        registry = PluginRegistry(PluginKind.LOCATOR, isolated=True)
        registry.register('dummy', DummyLocator)

        instance = registry.create_instance('dummy', {'root': '/srv'})

        assert isinstance(instance, DummyLocator)
        assert instance.root == '/srv'

    def test_new_instance_every_call(self):
        registry = PluginRegistry(PluginKind.LOCATOR, isolated=True)
        registry.register('dummy', DummyLocator)

        assert registry.create_instance('dummy') is not registry.create_instance('dummy')

    def test_isolated_registry_does_not_touch_global_index(self):
        registry = PluginRegistry(PluginKind.LOCATOR, isolated=True)
        registry.register('isolated_only', DummyLocator)

        assert not PluginRegistry(PluginKind.LOCATOR).has_plugin('isolated_only')
        assert registry.list_plugins() == ['isolated_only']

    def test_services_read_only(self):
        registry = PluginRegistry(PluginKind.LOCATOR, {'config': None})

        with pytest.raises(TypeError):
            registry.services['config'] = object()

        registry.add_service('extra', 1)
        assert registry.services['extra'] == 1

    def test_default_registries_wiring(self, config):
        registries = create_default_registries(config)

        handler = registries['library_type_factory'].create_instance('asset')

        assert isinstance(handler, AssetLibraryType)
        assert handler.locator_factory is registries['locator_factory']
        assert handler.version_detector_factory is registries['version_detector_factory']
        assert handler.config is config
        assert registries['locator_factory'].services['locator_factory'] is registries['locator_factory']
