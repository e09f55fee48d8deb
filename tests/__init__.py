"""
extlib Test Suite

Unit tests for library resolution, asset resolution and the plugin registry,
plus an end-to-end test over real files.
"""
