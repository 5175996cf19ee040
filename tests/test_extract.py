"""
Class name extraction tests

Tests finding atomic class names in markup, templates and scripts.
"""

from atomizer.lib.atomizer import Atomizer


class TestExtraction:
    """Test scanning text for class names"""

    def test_html_class_attribute(self, grammar):
        """Class names inside a double-quoted attribute"""
        html = '<div class="D-n W-1/3 foo">text</div>'
        assert grammar.classNames_find(html) == ["D-n", "W-1/3"]

    def test_quotes_and_braces_are_boundaries(self, grammar):
        """Single quotes and opening braces start a class name"""
        source = "<span class='C-#fff.5'>{M-neg10px}</span>"
        assert grammar.classNames_find(source) == ["C-#fff.5", "M-neg10px"]

    def test_class_at_start_of_text(self, grammar):
        """The first character of the text is not lost"""
        assert grammar.classNames_find("D-n") == ["D-n"]

    def test_no_match_inside_words(self, grammar):
        """A class name must start at a boundary"""
        assert grammar.classNames_find("xD-n a.D-b") == []

    def test_duplicates_removed_in_first_seen_order(self, grammar):
        """Duplicates are dropped, first occurrence decides the order"""
        source = "D-b D-n D-b W-10px D-n"
        assert grammar.classNames_find(source) == ["D-b", "D-n", "W-10px"]

    def test_extraction_is_idempotent(self, grammar):
        """Scanning twice gives the same result"""
        source = '<p class="Fz-12px D-n:h foo>D-b">'
        first = grammar.classNames_find(source)
        assert grammar.classNames_find(source) == first
        assert first == ["Fz-12px", "D-n:h", "foo>D-b"]

    def test_parent_inside_attribute(self, grammar):
        """The attribute name is not mistaken for a parent selector"""
        html = '<div class="foo_D-n">'
        assert grammar.classNames_find(html) == ["foo_D-n"]

    def test_unresolvable_names_are_still_found(self, grammar):
        """Extraction is syntactic only"""
        assert grammar.classNames_find("Fz-heading") == ["Fz-heading"]

    def test_helper_in_script(self, grammar):
        """Helpers inside a script string"""
        script = "el.className = 'LineClamp(3,4.5em) D-b';"
        assert grammar.classNames_find(script) == ["LineClamp(3,4.5em)", "D-b"]

    def test_multiline_text(self, grammar):
        """Newlines and tabs are whitespace boundaries"""
        source = "D-n\n\tW-a\nC-#000"
        assert grammar.classNames_find(source) == ["D-n", "W-a", "C-#000"]


class TestAtomizerExtraction:
    """Test extraction through the Atomizer with the built-in rules"""

    def test_builtin_rules(self):
        """Built-in rules recognise common class names"""
        atomizer = Atomizer()
        html = '<div class="D-n Fl-start Mstart-10px LineClamp(2,3em) Op-1/2">'
        assert atomizer.classNames_find(html) == [
            "D-n",
            "Fl-start",
            "Mstart-10px",
            "LineClamp(2,3em)",
            "Op-1/2",
        ]

    def test_added_rules_are_recognised(self, rules):
        """Adding rules invalidates the grammar"""
        atomizer = Atomizer(rules=rules)
        assert atomizer.classNames_find("Op-1") == []

        atomizer.rules_add([{"prefix": "Op", "properties": ["opacity"]}])
        assert atomizer.classNames_find("Op-1") == ["Op-1"]
