"""Tests for the mintty parser."""

import pytest

from colortty.color import ColorValue
from colortty.errors import MalformedColor, MissingField, OutOfRange
from colortty.formats.mintty import MinttyParser, parse_mintty_color
from tests.fixtures.sample_data import DRACULA_MINTTY_HEX, XTERM_COLORS, make_minttyrc


class TestParseMinttyColor:
    """Test decimal triplet parsing."""

    @pytest.mark.unit
    def test_valid(self):
        assert parse_mintty_color("12,3,255") == ColorValue(12, 3, 255)

    @pytest.mark.unit
    def test_whitespace_tolerated(self):
        assert parse_mintty_color(" 12 , 3 ,255 ") == ColorValue(12, 3, 255)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["123", "1,2", "1,2,3,4", "abc,3,fo", "1.5,2,3", ""])
    def test_invalid_format(self, value):
        with pytest.raises(MalformedColor):
            parse_mintty_color(value)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["\u0661\u0662,0,0", "0,\uff15,0", "0,0,\u00b2"])
    def test_non_ascii_digits(self, value):
        """Test that only ASCII decimal digits are channel values."""
        with pytest.raises(MalformedColor):
            parse_mintty_color(value)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["256,0,0", "0,-1,0", "0,0,999"])
    def test_out_of_range(self, value):
        with pytest.raises(OutOfRange):
            parse_mintty_color(value)


class TestMinttyParser:
    """Test full mintty theme parsing."""

    @pytest.mark.unit
    def test_minimal_theme(self, minttyrc_text):
        scheme = MinttyParser().parse(minttyrc_text, name="xterm")
        assert scheme.name == "xterm"
        assert [c.to_rgb_triplet() for c in scheme.ansi_colors] == XTERM_COLORS
        assert scheme.foreground == ColorValue(255, 255, 255)
        assert scheme.background == ColorValue(0, 0, 0)

    @pytest.mark.unit
    def test_cursor_defaults_to_foreground(self, minttyrc_text):
        scheme = MinttyParser().parse(minttyrc_text)
        assert scheme.cursor == scheme.foreground

    @pytest.mark.unit
    def test_cursor_colour(self):
        scheme = MinttyParser().parse(make_minttyrc(cursor=(1, 2, 3)))
        assert scheme.cursor == ColorValue(1, 2, 3)

    @pytest.mark.unit
    def test_no_selection(self, minttyrc_text):
        scheme = MinttyParser().parse(minttyrc_text)
        assert scheme.selection_foreground is None
        assert scheme.selection_background is None
        assert scheme.cursor_text is None

    @pytest.mark.unit
    def test_accepts_bytes(self, minttyrc_text):
        from_bytes = MinttyParser().parse(minttyrc_text.encode("utf-8"))
        assert from_bytes == MinttyParser().parse(minttyrc_text)

    @pytest.mark.unit
    def test_dracula_fixture(self, dracula_minttyrc):
        scheme = MinttyParser().parse(dracula_minttyrc, name="Dracula")
        assert [c.to_hex() for c in scheme.ansi_colors] == DRACULA_MINTTY_HEX
        assert scheme.background.to_hex() == "282a36"
        assert scheme.foreground.to_hex() == "f8f8f2"

    @pytest.mark.unit
    def test_ignores_blank_comment_and_unknown_lines(self):
        text = make_minttyrc(
            extra_lines=["", "# comment", "Font=Consolas", "Columns=120", "garbage"]
        )
        scheme = MinttyParser().parse(text)
        assert scheme.ansi_colors[0] == ColorValue(0, 0, 0)

    @pytest.mark.unit
    def test_windows_line_endings(self, minttyrc_text):
        scheme = MinttyParser().parse(minttyrc_text.replace("\n", "\r\n"))
        assert scheme.ansi_colors[1] == ColorValue(205, 0, 0)

    @pytest.mark.unit
    def test_keys_are_case_sensitive(self):
        text = make_minttyrc(omit=("Red",), extra_lines=["red=1,2,3"])
        with pytest.raises(MissingField) as exc_info:
            MinttyParser().parse(text)
        assert exc_info.value.fields == ["red"]

    @pytest.mark.unit
    def test_splits_on_first_equals(self):
        """Only the first '=' separates key and value."""
        text = make_minttyrc(omit=("Red",), extra_lines=["Red=1,2,3=4"])
        with pytest.raises(MalformedColor):
            MinttyParser().parse(text)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "key, slot",
        [
            ("Black", "black"),
            ("BoldWhite", "bright_white"),
            ("ForegroundColour", "foreground"),
            ("BackgroundColour", "background"),
        ],
    )
    def test_missing_required_key(self, key, slot):
        with pytest.raises(MissingField) as exc_info:
            MinttyParser().parse(make_minttyrc(omit=(key,)))
        assert exc_info.value.fields == [slot]

    @pytest.mark.unit
    def test_empty_input(self):
        with pytest.raises(MissingField) as exc_info:
            MinttyParser().parse("")
        assert len(exc_info.value.fields) == 18

    @pytest.mark.unit
    def test_later_assignment_wins(self):
        text = make_minttyrc(extra_lines=["Red=1,1,1"])
        assert MinttyParser().parse(text).ansi_colors[1] == ColorValue(1, 1, 1)
