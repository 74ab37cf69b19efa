"""Tests for composing AnkiTrans card fields"""

from pathlib import Path

import pytest

from ankitrans import compose, extract
from ankitrans.core.composer import FieldComposer, primary_meaning
from ankitrans.exceptions import WordValidationError
from ankitrans.models import (
    FIELD_NAMES,
    Collocation,
    DetailedSenses,
    ExamplePair,
    NumberedDef,
    Sense,
    SenseGroup,
    WordRecord,
)

SOURCE_DIR = Path(__file__).resolve().parent / "source"


def fixture_html(name: str) -> str:
    return (SOURCE_DIR / f"{name}.html").read_text(encoding="utf-8")


def make_record(**overrides) -> WordRecord:
    data = {"query_term": "apple", "headword": "apple"}
    data.update(overrides)
    return WordRecord(**data)


class TestFieldContract:
    """Every FieldSet carries exactly the eight note fields"""

    def test_minimal_record_has_all_fields_empty_but_word(self):
        fields = compose("apple", make_record()).to_dict()
        assert list(fields) == list(FIELD_NAMES)
        assert fields["Word"] == "apple"
        assert all(fields[name] == "" for name in FIELD_NAMES[1:])

    def test_full_page_has_all_fields(self):
        record = extract(fixture_html("bing_word_application"), "application")
        fields = compose("application", record).to_dict()
        assert list(fields) == list(FIELD_NAMES)
        assert all(isinstance(value, str) for value in fields.values())
        assert all(fields[name] for name in FIELD_NAMES)

    def test_compose_is_idempotent(self):
        record = extract(fixture_html("bing_word_application"), "application")
        assert compose("application", record) == compose("application", record)


class TestScenarios:
    """End to end from fixture HTML to card fields"""

    def test_concise_only_page(self):
        record = extract(fixture_html("bing_word_application_concise"), "application")
        fields = compose("application", record).to_dict()

        assert fields["Translation"] == (
            '<div class="mean-line"><span class="pos-tag">n.</span> '
            '<span class="mean-text">应用；申请</span></div>'
        )
        assert fields["DomainDefs"].count('<li class="domain-li">') == 2
        assert '<span class="num">1.</span> 应用' in fields["DomainDefs"]
        assert '<span class="num">2.</span> 申请' in fields["DomainDefs"]
        assert "英汉释义" in fields["DomainDefs"]
        for name in ("Inflections", "Collocations", "Synonyms", "Example"):
            assert fields[name] == ""

    def test_inflected_query(self):
        record = extract(fixture_html("bing_word_applications"), "applications")
        fields = compose("applications", record).to_dict()

        assert fields["Word"] == "applications"
        assert "plural" in fields["Inflections"]
        assert "application" in fields["Inflections"]
        assert fields["Inflections"].startswith('<div class="inflection-tips">')


class TestInflections:
    """Prose note first, base-form notice second"""

    def test_base_form_notice_when_headword_differs(self):
        record = make_record(query_term="apples", headword="apple")
        assert FieldComposer().render_inflections("apples", record) == (
            '<div class="inflection-tips">ℹ️ 原型为 <b>apple</b></div>'
        )

    def test_case_only_difference_is_not_a_base_form(self):
        record = make_record(query_term="Apple", headword="apple")
        assert FieldComposer().render_inflections("Apple", record) == ""

    def test_note_wins_over_base_form(self):
        record = make_record(
            query_term="apples", headword="apple", inflection_note="复数: apples"
        )
        assert "原型为" not in FieldComposer().render_inflections("apples", record)


def test_phonetic_sides():
    composer = FieldComposer()
    both = make_record(phonetic_us="ˈæp(ə)l", phonetic_uk="ˈæpl")
    assert composer.render_phonetic(both) == (
        '<span class="ph-us">🇺🇸 /ˈæp(ə)l/</span> <span class="ph-uk">🇬🇧 /ˈæpl/</span>'
    )
    uk_only = make_record(phonetic_uk="ˈæpl")
    assert composer.render_phonetic(uk_only) == '<span class="ph-uk">🇬🇧 /ˈæpl/</span>'


class TestCaps:
    """Display caps keep the card bounded"""

    def test_detailed_groups_and_entries(self):
        groups = [
            SenseGroup(
                part_of_speech=f"pos{g}",
                numbered_defs=[NumberedDef(index=str(i), text=f"d{g}-{i}") for i in range(1, 7)],
            )
            for g in range(5)
        ]
        record = make_record(detailed_senses=DetailedSenses(primary=groups))
        html = FieldComposer().render_domain_defs(record)
        assert html.count('<div class="domain-group">') == 3
        assert html.count('<li class="domain-li">') == 12
        assert "d0-4" in html and "d0-5" not in html
        assert "pos3" not in html

    def test_two_tracks_joined_by_divider(self):
        group = SenseGroup(
            part_of_speech="n.", numbered_defs=[NumberedDef(index="1", text="x")]
        )
        record = make_record(
            detailed_senses=DetailedSenses(primary=[group], secondary=[group])
        )
        html = FieldComposer().render_domain_defs(record)
        assert html.count("<br/>") == 1
        assert html.index("英汉释义") < html.index("英英释义")

    def test_collocations(self):
        record = make_record(
            collocations=[
                Collocation(relation_type=f"t{g}", items=[f"w{i}" for i in range(7)])
                for g in range(4)
            ]
        )
        html = FieldComposer().render_collocations(record)
        assert html.count('<div class="col-row">') == 3
        assert html.count('<span class="col-tag">') == 15
        assert "w5" not in html

    def test_ten_synonyms_render_eight(self):
        synonyms = [f"syn{i}" for i in range(10)]
        record = make_record(synonyms=synonyms, antonyms=[f"ant{i}" for i in range(7)])
        html = FieldComposer().render_synonyms(record)
        assert ", ".join(synonyms[:8]) in html
        assert "syn8" not in html
        assert "ant4" in html and "ant5" not in html
        assert html.index("同义词") < html.index("反义词")

    def test_examples(self):
        examples = [ExamplePair(source=f"s{i}", target=f"t{i}") for i in range(3)]
        html = FieldComposer().render_examples(make_record(examples=examples))
        assert html.count('<div class="ex-pair">') == 3


def test_record_text_is_escaped():
    record = make_record(
        query_term="a<b",
        headword="a<b",
        senses=[Sense(part_of_speech="n.", meanings=["<script>x</script>", "R&D"])],
        examples=[ExamplePair(source='say "hi"', target="你好 & 再见")],
    )
    fields = compose("a<b", record).to_dict()
    assert fields["Word"] == "a&lt;b"
    assert "<script>" not in fields["Translation"]
    assert "&lt;script&gt;" in fields["Translation"]
    assert "R&amp;D" in fields["Translation"]
    assert "你好 &amp; 再见" in fields["Example"]


def test_word_keeps_query_term_verbatim():
    record = make_record(query_term="apple", headword="apple")
    assert compose("Apple", record).word == "Apple"


def test_word_is_html_escaped():
    record = make_record(query_term="don't", headword="don't")
    assert compose("don't", record).word == "don&#39;t"


class TestPreconditions:
    """Argument checks"""

    @pytest.mark.parametrize("term", ["", "  ", None])
    def test_bad_query_term(self, term):
        with pytest.raises(WordValidationError):
            compose(term, make_record())

    def test_record_type(self):
        with pytest.raises(TypeError):
            compose("apple", {"headword": "apple"})  # type: ignore[arg-type]


def test_primary_meaning():
    assert primary_meaning(None) == ""
    assert primary_meaning(make_record()) == ""
    record = make_record(senses=[Sense(part_of_speech="n.", meanings=["苹果", "苹果树"])])
    assert primary_meaning(record) == "苹果"
