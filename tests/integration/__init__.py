"""Integration tests: library managers built from settings over real files."""
