"""Tests for TextProcessor cleaning and normalisation"""

from ankitrans.core.text_processor import TextProcessor


class TestNormalizeTerm:
    """Lookup term normalisation"""

    def test_trims_collapses_and_lowercases(self):
        assert TextProcessor.normalize_term("  Hello   World \n") == "hello world"

    def test_empty_and_whitespace_only(self):
        assert TextProcessor.normalize_term("") is None
        assert TextProcessor.normalize_term("   \t ") is None

    def test_non_string(self):
        assert TextProcessor.normalize_term(None) is None  # type: ignore[arg-type]
        assert TextProcessor.normalize_term(42) is None  # type: ignore[arg-type]


class TestCleanHtml:
    """The shared fragment cleaner"""

    def test_removes_tags_and_collapses_whitespace(self):
        fragment = "<span>The</span>   <b>application</b>\n of <i>science</i> "
        assert TextProcessor.clean_html(fragment) == "The application of science"

    def test_decodes_entities(self):
        fragment = "a&nbsp;b&#160;c &lt;d&gt; &quot;e&quot; &#39;f&apos; g &amp; h"
        assert TextProcessor.clean_html(fragment) == "a b c <d> \"e\" 'f' g & h"

    def test_decodes_exactly_once(self):
        # A literal "&lt;" in the text is encoded as "&amp;lt;" in markup
        assert TextProcessor.clean_html("x &amp;lt; y") == "x &lt; y"
        assert TextProcessor.clean_html("&amp;amp;") == "&amp;"

    def test_empty(self):
        assert TextProcessor.clean_html("") == ""
        assert TextProcessor.clean_html("<div> </div>") == ""


class TestSplitMeanings:
    """Concise gloss splitting"""

    def test_cjk_and_ascii_semicolons(self):
        assert TextProcessor.split_meanings("应用；申请;应用程序") == [
            "应用",
            "申请",
            "应用程序",
        ]

    def test_drops_empty_segments(self):
        assert TextProcessor.split_meanings("；应用；；申请; ") == ["应用", "申请"]

    def test_no_separator(self):
        assert TextProcessor.split_meanings("苹果") == ["苹果"]
        assert TextProcessor.split_meanings("") == []


def test_extract_bracketed():
    assert TextProcessor.extract_bracketed("美 [ˈæp(ə)l]") == "ˈæp(ə)l"
    assert TextProcessor.extract_bracketed("no brackets") == ""


def test_ordered_unique_keeps_first_occurrence():
    values = ["use", "request", "use", "", "Use", "request"]
    assert TextProcessor.ordered_unique(values) == ["use", "request", "Use"]


def test_clean_text_only_touches_whitespace():
    assert TextProcessor.clean_text("  a &amp;\n\tb  ") == "a &amp; b"
