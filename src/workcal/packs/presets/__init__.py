"""Bundled calendar presets (YAML)."""
