"""Tests for converter options and config loading."""

import tempfile
from pathlib import Path

import pytest

from html2md.config import ConverterOptions, load_options_from_config, options_from_mapping
from html2md.context import IGNORED_TAGS


def _write_config(tmpdir: str, text: str) -> Path:
    path = Path(tmpdir) / ".html2md.toml"
    path.write_text(text)
    return path


class TestDefaults:
    def test_defaults(self):
        options = ConverterOptions()
        assert options.wrap_width == 80
        assert options.code_fence == "````"
        assert options.ignored_tags == IGNORED_TAGS

    def test_missing_file_gives_defaults(self):
        assert load_options_from_config("/nonexistent/.html2md.toml") == ConverterOptions()

    def test_config_without_converter_table(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _write_config(tmpdir, '[[hooks]]\nscript = "x.py"\n')
            assert load_options_from_config(path) == ConverterOptions()


class TestLoadOptions:
    def test_loads_converter_table(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _write_config(tmpdir, """
[converter]
wrap_width = 100
code_fence = "```"
ignored_tags = ["Script", "aside"]
""")
            options = load_options_from_config(path)
            assert options.wrap_width == 100
            assert options.code_fence == "```"
            assert options.ignored_tags == frozenset({"script", "aside"})

    def test_unknown_key_warns(self, capsys):
        options = options_from_mapping({"wrap_width": 0, "colour": "red"})
        assert options.wrap_width == 0
        assert "unknown converter option 'colour'" in capsys.readouterr().err

    @pytest.mark.parametrize(
        ("table", "key"),
        [
            ({"wrap_width": "80"}, "wrap_width"),
            ({"wrap_width": -1}, "wrap_width"),
            ({"wrap_width": True}, "wrap_width"),
            ({"code_fence": ""}, "code_fence"),
            ({"ignored_tags": "script"}, "ignored_tags"),
        ],
    )
    def test_rejects_bad_values(self, table, key):
        with pytest.raises(ValueError, match=key):
            options_from_mapping(table)

    def test_invalid_toml_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _write_config(tmpdir, "[converter\n")
            with pytest.raises(ValueError):
                load_options_from_config(path)
