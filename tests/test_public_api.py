"""Tests for the dotconf public API surface.

Verifies that all expected names are importable from the top-level
``dotconf`` package and that ``__all__`` is comprehensive.
"""

import dotconf


class TestPublicAPI:
    def test_all_names_resolve(self):
        for name in dotconf.__all__:
            assert getattr(dotconf, name) is not None, name

    def test_config_importable(self):
        from dotconf import Config, load, parse_json, parse_json_file

        assert Config is not None
        assert load is not None
        assert parse_json is not None
        assert parse_json_file is not None

    def test_errors_importable(self):
        from dotconf import ConfigError, PathError, PathNotFoundError, TypeMismatchError

        assert issubclass(PathNotFoundError, PathError)
        assert issubclass(TypeMismatchError, ConfigError)

    def test_version(self):
        assert isinstance(dotconf.__version__, str)

    def test_no_private_names_exported(self):
        assert not [name for name in dotconf.__all__ if name.startswith("_")]

    def test_end_to_end(self):
        cfg = dotconf.parse_json('{"debug": true, "env": "dev"}')
        cfg.extend(dotconf.parse_json('{"debug": false, "env": "production"}'))
        assert cfg.get_bool("debug") is False
        assert cfg.get_string("env") == "production"
