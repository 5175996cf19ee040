"""
Selector helper tests

Tests escaping, pseudo-class expansion, comma masking and direction
placeholders.
"""

import pytest

from atomizer.lib.selectors import (
    PSEUDOS,
    commas_mask,
    commas_unmask,
    constants_replace,
    pseudo_get,
    selector_escape,
)


class TestEscape:
    """Test selector escaping"""

    @pytest.mark.parametrize("className, expected", [
        ("D-n", "D-n"),
        ("W-1/3", "W-1\\/3"),
        ("W-100%", "W-100\\%"),
        ("C-#fff", "C-\\#fff"),
        ("C-#fff.5", "C-\\#fff\\.5"),
        ("D-n:h", "D-n\\:h"),
        ("foo>D-n", "foo\\>D-n"),
        ("W-10px!", "W-10px\\!"),
        ("LineClamp(3,4.5em)", "LineClamp\\(3\\,4\\.5em\\)"),
        ("foo_D-n--sm", "foo_D-n--sm"),
        ("Fz-\u00e9", "Fz-\\\u00e9"),
    ])
    def test_escape(self, className, expected):
        """Characters outside ASCII [-_a-zA-Z0-9] are escaped"""
        assert selector_escape(className) == expected

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_value(self, value):
        """None and empty strings are rejected"""
        with pytest.raises(TypeError, match="str must be present"):
            selector_escape(value)

    def test_non_string_is_returned(self):
        """Other types pass through"""
        assert selector_escape(42) == 42


class TestPseudo:
    """Test pseudo-class lookup"""

    def test_abbreviation(self):
        """Abbreviations expand to the full pseudo-class"""
        assert pseudo_get(":h") == ":hover"
        assert pseudo_get(":fc") == ":first-child"

    def test_full_form(self):
        """Full forms are returned as is"""
        assert pseudo_get(":hover") == ":hover"

    def test_missing_or_unknown(self):
        """Nothing to expand"""
        assert pseudo_get(None) == ""
        assert pseudo_get(":nope") == ""

    def test_abbreviations_are_unique(self):
        """Every abbreviation names one pseudo-class"""
        assert len(set(PSEUDOS.values())) == len(PSEUDOS)


class TestPlaceholders:
    """Test comma masking and directions"""

    def test_commas(self):
        """Masking then unmasking restores the selector"""
        masked = commas_mask(".a\\,b")
        assert "," not in masked
        assert commas_unmask(masked) == ".a\\,b"

    def test_directions(self):
        """__start__ and __end__ become left and right"""
        css = "float: __start__; margin-__end__: 0"
        assert constants_replace(css) == "float: left; margin-right: 0"

    def test_directions_rtl(self):
        """Right-to-left swaps the directions"""
        css = "float: __start__; margin-__end__: 0"
        assert constants_replace(css, rtl=True) == "float: right; margin-left: 0"

    def test_non_text_is_returned(self):
        """Empty or non-string input passes through"""
        assert constants_replace("") == ""
        assert constants_replace(None) is None
