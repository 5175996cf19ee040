"""
Class name resolution tests

Tests turning class names into values and declarations: fractions, colors,
numbers, named suffixes (keyword rules and custom values) and helpers.
"""

import pytest

from atomizer.lib.resolver import (
    fraction_toPercentage,
    hex_toRgb,
    record_resolve,
    records_resolve,
)
from atomizer.models.config import AtomizerConfig
from atomizer.models.match import FractionValue


class TestFractions:
    """Test fraction -> percentage"""

    @pytest.mark.parametrize("numerator, denominator, expected", [
        (1, 3, "33.3333%"),
        (2, 4, "50%"),
        (2, 3, "66.6667%"),
        (1, 8, "12.5%"),
        (1, 1, "100%"),
        (0, 5, "0%"),
    ])
    def test_percentage(self, numerator, denominator, expected):
        """Percentages are rounded to 4 decimal places"""
        assert fraction_toPercentage(FractionValue(numerator, denominator)) == expected

    def test_huge_numerator(self):
        """No float conversion, so big fractions do not overflow"""
        percentage = fraction_toPercentage(FractionValue(int("9" * 400), 1))
        assert percentage == "9" * 400 + "00%"

    def test_huge_fraction_rounds(self):
        """Exact arithmetic keeps the 4 decimal places"""
        assert fraction_toPercentage(FractionValue(10 ** 30 + 1, 3 * 10 ** 28)) == "3333.3333%"

    def test_fraction_class(self, grammar, config):
        """W-1/3 resolves to a percentage"""
        assert record_resolve("W-1/3", grammar, config).value == "33.3333%"


class TestColors:
    """Test hex colors"""

    def test_hex_to_rgb(self):
        """3 and 6 digit hex colors"""
        assert hex_toRgb("#fff") == (255, 255, 255)
        assert hex_toRgb("#336699") == (51, 102, 153)
        assert hex_toRgb("#000") == (0, 0, 0)

    def test_hex_without_alpha(self, grammar, config):
        """Hex colors are kept verbatim"""
        assert record_resolve("C-#000", grammar, config).value == "#000"

    def test_hex_with_alpha(self, grammar, config):
        """Alpha turns the color into rgba()"""
        assert record_resolve("C-#fff.5", grammar, config).value == "rgba(255,255,255,.5)"
        assert record_resolve("C-#336699.25", grammar, config).value == "rgba(51,102,153,.25)"

    def test_non_ascii_alpha_digit(self, grammar, config):
        """Alpha digits are ASCII only"""
        assert record_resolve("C-#fff.\u0665", grammar, config) is None


class TestNumbers:
    """Test numbers, units and signs"""

    def test_number_with_unit(self, grammar, config):
        """Number and unit are concatenated"""
        assert record_resolve("M-10px", grammar, config).value == "10px"

    def test_negative_number(self, grammar, config):
        """neg becomes a minus sign"""
        assert record_resolve("M-neg10px", grammar, config).value == "-10px"

    def test_important(self, grammar, config):
        """! appends !important"""
        record = record_resolve("W-10px!", grammar, config)
        assert record.value == "10px !important"
        assert record.important is True


class TestNamedSuffixes:
    """Test keyword rules and custom values"""

    def test_keyword_rule(self, grammar, config):
        """A keyword rule produces an explicit declaration"""
        record = record_resolve("D-n", grammar, config)
        assert record.declaration == {"display": "none"}
        assert record.named == "n"

    def test_keyword_rule_important(self, grammar, config):
        """Every property of a keyword declaration gets !important"""
        record = record_resolve("D-b!", grammar, config)
        assert record.declaration == {"display": "block !important"}

    def test_keyword_beats_custom(self, grammar):
        """Keyword rules are looked up before custom values"""
        config = AtomizerConfig(custom={"D-n": "grid", "n": "grid"})
        record = record_resolve("D-n", grammar, config)
        assert record.declaration == {"display": "none"}

    def test_keyword_on_rule_allowing_values(self, grammar, config):
        """Rules taking numbers can still declare keywords"""
        assert record_resolve("W-a", grammar, config).declaration == {"width": "auto"}

    def test_custom_with_prefix_beats_bare_custom(self, grammar):
        """custom["Fz-heading"] wins over custom["heading"]"""
        config = AtomizerConfig(custom={"Fz-heading": "80px", "heading": "40px"})
        assert record_resolve("Fz-heading", grammar, config).value == "80px"

    def test_bare_custom(self, grammar):
        """custom["heading"] applies to any prefix"""
        config = AtomizerConfig(custom={"heading": "40px"})
        assert record_resolve("Fz-heading", grammar, config).value == "40px"

    def test_custom_important(self, grammar):
        """Custom values take !important too"""
        config = AtomizerConfig(custom={"heading": "40px"})
        assert record_resolve("Fz-heading!", grammar, config).value == "40px !important"

    def test_unresolved_without_custom(self, grammar, config):
        """Unknown named suffix: no value and one warning"""
        warnings = []
        record = record_resolve("Fz-heading", grammar, config, warnings)
        assert record.value is None
        assert record.declaration is None
        assert warnings == ["Fz-heading"]

    def test_unresolved_with_custom(self, grammar):
        """Custom values that do not cover the suffix"""
        warnings = []
        config = AtomizerConfig(custom={"title": "20px"})
        record = record_resolve("Fz-heading", grammar, config, warnings)
        assert record.value is None
        assert warnings == ["Fz-heading"]

    def test_unresolved_important_stays_unresolved(self, grammar, config):
        """! does not turn a missing value into a value"""
        assert record_resolve("Fz-heading!", grammar, config).value is None

    def test_rule_without_suffix_values(self, grammar, config):
        """Numbers are named suffixes when the rule does not take values"""
        warnings = []
        record = record_resolve("D-1", grammar, config, warnings)
        assert record.value is None
        assert warnings == ["D-1"]


class TestHelpers:
    """Test helper parameters"""

    def test_params(self, grammar, config):
        """Parameters are split on commas, in order"""
        record = record_resolve("LineClamp(3,4.5em)", grammar, config)
        assert record.params == ("3", "4.5em")
        assert record.prefix == "LineClamp"
        assert record.value is None

    def test_empty_params(self, grammar, config):
        """() carries no parameters"""
        assert record_resolve("LineClamp()", grammar, config).params == ()


class TestRecords:
    """Test record fields and batch resolution"""

    def test_modifiers_are_kept(self, grammar, config):
        """Parent, pseudo and breakpoint end up in the record"""
        record = record_resolve("foo>D-n:h--sm", grammar, config)
        assert record.className == "foo>D-n:h--sm"
        assert record.parentSelector.parent == "foo"
        assert record.valuePseudo == ":h"
        assert record.breakPoint == "sm"

    def test_non_atomic_class_is_skipped(self, grammar, config):
        """Class names the grammar rejects resolve to None"""
        assert record_resolve("foo", grammar, config) is None

    def test_resolution_is_deterministic(self, grammar, config):
        """Same input, same record"""
        assert record_resolve("C-#fff.5:h", grammar, config) == record_resolve("C-#fff.5:h", grammar, config)

    def test_batch_dedupes_and_collects_warnings(self, grammar, config):
        """Duplicates are resolved once, rejected names are dropped"""
        records, warnings = records_resolve(
            ["D-n", "D-n", "foo", "Fz-heading", "W-10px"], grammar, config
        )
        assert [record.className for record in records] == ["D-n", "Fz-heading", "W-10px"]
        assert warnings == ["Fz-heading"]
