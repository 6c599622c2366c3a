"""Tests for parser discovery and format detection."""

import pytest

from colortty.errors import AmbiguousInput, UnknownFormat
from colortty.formats import (
    GoghParser,
    ITermParser,
    MinttyParser,
    SchemeParser,
    detect_format,
    get_parser,
    list_available_formats,
)
from colortty.formats.base import discover_parsers


class TestDiscovery:
    """Test the parser registry."""

    @pytest.mark.unit
    def test_all_formats_registered(self):
        assert list_available_formats() == ["gogh", "iterm", "mintty"]

    @pytest.mark.unit
    def test_registry_holds_parser_classes(self):
        for parser_class in discover_parsers().values():
            assert issubclass(parser_class, SchemeParser)

    @pytest.mark.unit
    def test_get_parser(self):
        assert get_parser("iterm") is ITermParser

    @pytest.mark.unit
    def test_get_parser_unknown(self):
        with pytest.raises(UnknownFormat) as exc_info:
            get_parser("xresources")
        assert exc_info.value.name == "xresources"

    @pytest.mark.unit
    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            SchemeParser()


class TestDetectFormat:
    """Test extension and hint based detection."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "filename, parser_class",
        [
            ("Dracula.itermcolors", ITermParser),
            ("themes/dracula.minttyrc", MinttyParser),
            ("/tmp/gogh/dracula.sh", GoghParser),
        ],
    )
    def test_by_extension(self, filename, parser_class):
        assert detect_format(filename) is parser_class

    @pytest.mark.unit
    def test_hint_wins_over_extension(self):
        assert detect_format("Dracula.itermcolors", hint="mintty") is MinttyParser

    @pytest.mark.unit
    def test_hint_without_filename(self):
        assert detect_format(None, hint="gogh") is GoghParser
        assert detect_format("-", hint="iterm") is ITermParser

    @pytest.mark.unit
    def test_unknown_hint(self):
        with pytest.raises(UnknownFormat):
            detect_format("Dracula.itermcolors", hint="kitty")

    @pytest.mark.unit
    @pytest.mark.parametrize("filename", [None, "", "-"])
    def test_no_filename(self, filename):
        with pytest.raises(AmbiguousInput):
            detect_format(filename)

    @pytest.mark.unit
    @pytest.mark.parametrize("filename", ["some-color-theme", "theme.toml", "sh"])
    def test_unknown_extension(self, filename):
        with pytest.raises(AmbiguousInput) as exc_info:
            detect_format(filename)
        assert exc_info.value.filename == filename

    @pytest.mark.unit
    def test_extension_is_case_sensitive(self):
        with pytest.raises(AmbiguousInput):
            detect_format("Dracula.ITERMCOLORS")
