"""Extract a structured WordRecord from a Bing Dictionary results page.

The page markup is undocumented and has shipped several incompatible
revisions, so every record field has its own RuleChain of strategies
(current layout first, older layouts after). Rules run independently
against the whole document; a section that cannot be found yields the
field's empty default. Only argument type errors raise.
"""

import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..exceptions import MalformedInputError, WordValidationError
from ..logging_config import get_logger
from ..models.word_record import (
    Collocation,
    DetailedSenses,
    ExamplePair,
    NumberedDef,
    Sense,
    SenseGroup,
    WordForm,
    WordRecord,
)
from .constants import DictionaryConstants, ExtractionConstants
from .interfaces import ExtractorInterface
from .rules import ParsedPage, RuleChain
from .text_processor import TextProcessor

logger = get_logger(__name__)

C = ExtractionConstants

PHONETIC_US_MARKUP_RE = re.compile(C.PHONETIC_US_MARKUP_PATTERN)
PHONETIC_UK_MARKUP_RE = re.compile(C.PHONETIC_UK_MARKUP_PATTERN)
LEGACY_PHONETIC_US_RE = re.compile(C.LEGACY_PHONETIC_US_PATTERN)
LEGACY_PHONETIC_UK_RE = re.compile(C.LEGACY_PHONETIC_UK_PATTERN)
AUDIO_URL_RE = re.compile(C.AUDIO_URL_PATTERN)
DETAILED_NUMBER_RE = re.compile(C.DETAILED_NUMBER_PATTERN)


def parse_page(html: str, query_term: str) -> ParsedPage:
    """Parse the document once; unparseable input becomes an empty document"""
    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as e:
        logger.debug(f"HTML parser gave up, continuing with empty document: {e}")
        soup = BeautifulSoup("", "html.parser")
    return ParsedPage(soup=soup, html=html, query_term=query_term)


def _text(el: Tag | None) -> str:
    return TextProcessor.clean_text(el.get_text(" ")) if el is not None else ""


def _fragment_text(el: Tag | None) -> str:
    """Plain text of an element's inner HTML via the shared cleaner"""
    return TextProcessor.clean_html(el.decode_contents()) if el is not None else ""


def _next_tag(el: Tag) -> Tag | None:
    """First element sibling after ``el``, skipping whitespace text"""
    for sibling in el.next_siblings:
        if isinstance(sibling, Tag):
            return sibling
        if str(sibling).strip():
            return None
    return None


def _has_class(el: Tag | None, *names: str) -> bool:
    if el is None:
        return False
    classes = el.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    return any(name in classes for name in names)


def _strip_phonetic(value: str) -> str:
    return TextProcessor.clean_text(value).strip("/ ")


# Headword


def _headword_by(selector: str):
    def strategy(page: ParsedPage) -> str:
        return _text(page.soup.select_one(selector))

    return strategy


HEADWORD_RULES: RuleChain[str] = RuleChain(
    "headword",
    [
        ("heading", _headword_by(C.HEADWORD_SELECTORS[0])),
        ("hw_marker", _headword_by(C.HEADWORD_SELECTORS[1])),
        ("header_h1", _headword_by(C.HEADWORD_SELECTORS[2])),
    ],
    default=lambda page: page.query_term,
)


# Phonetics


def _phonetic_from_element(selector: str):
    def strategy(page: ParsedPage) -> str:
        el = page.soup.select_one(selector)
        if el is None:
            return ""
        return _strip_phonetic(TextProcessor.extract_bracketed(el.get_text(" ")))

    return strategy


def _phonetic_from_markup(pattern: re.Pattern[str]):
    def strategy(page: ParsedPage) -> str:
        match = pattern.search(page.html)
        return _strip_phonetic(TextProcessor.clean_html(match.group(1))) if match else ""

    return strategy


def _phonetic_from_legacy_header(pattern: re.Pattern[str]):
    def strategy(page: ParsedPage) -> str:
        el = page.soup.select_one(C.LEGACY_PHONETIC_SELECTOR)
        if el is None:
            return ""
        match = pattern.search(el.get_text(" "))
        return _strip_phonetic(match.group(1)) if match else ""

    return strategy


PHONETIC_US_RULES: RuleChain[str] = RuleChain(
    "phonetic_us",
    [
        ("element", _phonetic_from_element(C.PHONETIC_US_SELECTOR)),
        ("markup", _phonetic_from_markup(PHONETIC_US_MARKUP_RE)),
        ("legacy_header", _phonetic_from_legacy_header(LEGACY_PHONETIC_US_RE)),
    ],
    default=lambda page: "",
)

PHONETIC_UK_RULES: RuleChain[str] = RuleChain(
    "phonetic_uk",
    [
        ("element", _phonetic_from_element(C.PHONETIC_UK_SELECTOR)),
        ("markup", _phonetic_from_markup(PHONETIC_UK_MARKUP_RE)),
        ("legacy_header", _phonetic_from_legacy_header(LEGACY_PHONETIC_UK_RE)),
    ],
    default=lambda page: "",
)


# Audio


def _absolute_url(link: str) -> str:
    link = link.strip()
    return urljoin(DictionaryConstants.SITE_ROOT + "/", link) if link else ""


def _audio_from_link_attr(element_id: str):
    def strategy(page: ParsedPage) -> str:
        el = page.soup.find(id=element_id)
        if not isinstance(el, Tag):
            return ""
        link = el.get(C.AUDIO_LINK_ATTR)
        return _absolute_url(link) if isinstance(link, str) else ""

    return strategy


def _audio_from_handler(element_id: str):
    def strategy(page: ParsedPage) -> str:
        el = page.soup.find(id=element_id)
        if not isinstance(el, Tag):
            return ""
        for attr in C.LEGACY_AUDIO_ATTRS:
            handler = el.get(attr)
            if not isinstance(handler, str):
                continue
            match = AUDIO_URL_RE.search(handler)
            if match:
                return _absolute_url(match.group(1))
        return ""

    return strategy


AUDIO_US_RULES: RuleChain[str] = RuleChain(
    "audio_us",
    [
        ("mp3link", _audio_from_link_attr(C.AUDIO_US_ID)),
        ("click_handler", _audio_from_handler(C.AUDIO_US_ID)),
    ],
    default=lambda page: "",
)

AUDIO_UK_RULES: RuleChain[str] = RuleChain(
    "audio_uk",
    [
        ("mp3link", _audio_from_link_attr(C.AUDIO_UK_ID)),
        ("click_handler", _audio_from_handler(C.AUDIO_UK_ID)),
    ],
    default=lambda page: "",
)


# Word forms and inflection note


def _word_forms_in(selector: str):
    def strategy(page: ParsedPage) -> list[WordForm]:
        container = page.soup.select_one(selector)
        if container is None:
            return []
        forms: list[WordForm] = []
        for label_el in container.select(C.WORD_FORM_LABEL_SELECTOR):
            label = _text(label_el).rstrip("：:").strip()
            value_el = _next_tag(label_el)
            if value_el is None or value_el.name != "a":
                continue
            value = _text(value_el)
            if label and value:
                forms.append(WordForm(label=label, value=value))
        return forms

    return strategy


WORD_FORM_RULES: RuleChain[list[WordForm]] = RuleChain(
    "word_forms",
    [
        ("header_table", _word_forms_in(C.WORD_FORMS_SELECTORS[0])),
        ("any_table", _word_forms_in(C.WORD_FORMS_SELECTORS[1])),
    ],
    default=lambda page: [],
)


def _inflection_from_tip(page: ParsedPage) -> str:
    return _fragment_text(page.soup.select_one(C.INFLECTION_TIP_SELECTOR))


def _inflection_from_word_forms(page: ParsedPage) -> str:
    forms = WORD_FORM_RULES.apply(page)
    return C.INFLECTION_PAIR_SEPARATOR.join(f"{f.label}: {f.value}" for f in forms)


INFLECTION_RULES: RuleChain[str] = RuleChain(
    "inflection_note",
    [
        ("tip", _inflection_from_tip),
        ("word_forms", _inflection_from_word_forms),
    ],
    default=lambda page: "",
)


# Concise senses


def _concise_senses_in(selector: str):
    def strategy(page: ParsedPage) -> list[Sense]:
        senses: list[Sense] = []
        for li in page.soup.select(selector):
            pos_el = li.select_one(f":scope > {C.CONCISE_POS_SELECTOR}")
            def_el = li.select_one(f":scope > {C.CONCISE_DEF_SELECTOR}")
            if pos_el is None or def_el is None:
                continue
            inner = def_el.find("span")
            gloss = _fragment_text(inner if isinstance(inner, Tag) else def_el)
            meanings = TextProcessor.split_meanings(gloss)
            if meanings:
                senses.append(Sense(part_of_speech=_text(pos_el), meanings=meanings))
        return senses

    return strategy


SENSE_RULES: RuleChain[list[Sense]] = RuleChain(
    "senses",
    [
        ("qdef_list", _concise_senses_in(C.CONCISE_SENSE_SELECTORS[0])),
        ("any_list", _concise_senses_in(C.CONCISE_SENSE_SELECTORS[1])),
    ],
    default=lambda page: [],
)


# Detailed senses


def _numbered_defs(row: Tag) -> list[NumberedDef]:
    defs: list[NumberedDef] = []
    for number_el in row.select(C.DETAILED_NUMBER_SELECTOR):
        match = DETAILED_NUMBER_RE.search(number_el.get_text())
        text_el = _next_tag(number_el)
        if not match or not _has_class(text_el, *C.DETAILED_TEXT_CLASSES):
            continue
        text = _fragment_text(text_el)
        if text:
            defs.append(NumberedDef(index=match.group(1), text=text))
    return defs


def _detailed_track(track_id: str, row_selector: str):
    def strategy(page: ParsedPage) -> list[SenseGroup]:
        section = page.soup.find(id=track_id)
        if not isinstance(section, Tag):
            return []
        groups: list[SenseGroup] = []
        for row in section.select(row_selector):
            defs = _numbered_defs(row)
            if defs:
                pos = _text(row.select_one(C.DETAILED_POS_SELECTOR))
                groups.append(SenseGroup(part_of_speech=pos, numbered_defs=defs))
        return groups

    return strategy


PRIMARY_TRACK_RULES: RuleChain[list[SenseGroup]] = RuleChain(
    "detailed_primary",
    [
        ("table_rows", _detailed_track(C.PRIMARY_TRACK_ID, C.DETAILED_ROW_SELECTORS[0])),
        ("div_rows", _detailed_track(C.PRIMARY_TRACK_ID, C.DETAILED_ROW_SELECTORS[1])),
    ],
    default=lambda page: [],
)

SECONDARY_TRACK_RULES: RuleChain[list[SenseGroup]] = RuleChain(
    "detailed_secondary",
    [
        (
            "table_rows",
            _detailed_track(C.SECONDARY_TRACK_ID, C.DETAILED_ROW_SELECTORS[0]),
        ),
        ("div_rows", _detailed_track(C.SECONDARY_TRACK_ID, C.DETAILED_ROW_SELECTORS[1])),
    ],
    default=lambda page: [],
)


def synthesize_detailed_senses(senses: list[Sense]) -> list[SenseGroup]:
    """Number concise meanings per part of speech, starting at 1"""
    return [
        SenseGroup(
            part_of_speech=sense.part_of_speech,
            numbered_defs=[
                NumberedDef(index=str(i), text=meaning)
                for i, meaning in enumerate(sense.meanings, 1)
            ],
        )
        for sense in senses
        if sense.meanings
    ]


# Collocations


def _collocations_within(container: Tag) -> list[Collocation]:
    groups: list[Collocation] = []
    for title_el in container.select(C.COLLOCATION_TITLE_SELECTOR):
        items_el = _next_tag(title_el)
        if not _has_class(items_el, C.COLLOCATION_ITEMS_CLASS):
            continue
        items = [_text(span) for span in items_el.select(C.RELATED_WORD_SELECTOR)]
        items = [item for item in items if item]
        if items:
            groups.append(Collocation(relation_type=_text(title_el), items=items))
    return groups


def _collocations_in_section(page: ParsedPage) -> list[Collocation]:
    section = page.soup.find(id=C.COLLOCATION_SECTION_ID)
    return _collocations_within(section) if isinstance(section, Tag) else []


def _collocations_in_document(page: ParsedPage) -> list[Collocation]:
    return _collocations_within(page.soup)


COLLOCATION_RULES: RuleChain[list[Collocation]] = RuleChain(
    "collocations",
    [
        ("section", _collocations_in_section),
        ("document", _collocations_in_document),
    ],
    default=lambda page: [],
)


# Synonyms and antonyms


def _related_spans(section_id: str):
    def strategy(page: ParsedPage) -> list[str]:
        section = page.soup.find(id=section_id)
        if not isinstance(section, Tag):
            return []
        words = (_text(span) for span in section.select(C.RELATED_WORD_SELECTOR))
        return TextProcessor.ordered_unique(words)

    return strategy


def _related_links(section_id: str):
    def strategy(page: ParsedPage) -> list[str]:
        section = page.soup.find(id=section_id)
        if not isinstance(section, Tag):
            return []
        return TextProcessor.ordered_unique(_text(a) for a in section.find_all("a"))

    return strategy


SYNONYM_RULES: RuleChain[list[str]] = RuleChain(
    "synonyms",
    [
        ("spans", _related_spans(C.SYNONYM_SECTION_ID)),
        ("links", _related_links(C.SYNONYM_SECTION_ID)),
    ],
    default=lambda page: [],
)

ANTONYM_RULES: RuleChain[list[str]] = RuleChain(
    "antonyms",
    [
        ("spans", _related_spans(C.ANTONYM_SECTION_ID)),
        ("links", _related_links(C.ANTONYM_SECTION_ID)),
    ],
    default=lambda page: [],
)


# Examples


def _collect_examples(pairs) -> list[ExamplePair]:
    examples: list[ExamplePair] = []
    for source_el, target_el in pairs:
        source = _fragment_text(source_el)
        target = _fragment_text(target_el)
        if source and target:
            examples.append(ExamplePair(source=source, target=target))
            if len(examples) >= C.MAX_EXAMPLES:
                break
    return examples


def _examples_from_blocks(page: ParsedPage) -> list[ExamplePair]:
    pairs = (
        (
            block.select_one(C.EXAMPLE_SOURCE_SELECTOR),
            block.select_one(C.EXAMPLE_TARGET_SELECTOR),
        )
        for block in page.soup.select(C.EXAMPLE_BLOCK_SELECTOR)
    )
    return _collect_examples(pairs)


def _translation_after(source_el: Tag) -> Tag | None:
    """The target sentence following ``source_el`` before the next source sentence"""
    for sibling in source_el.find_next_siblings():
        if _has_class(sibling, C.EXAMPLE_SOURCE_CLASS):
            return None
        if _has_class(sibling, C.EXAMPLE_TARGET_CLASS):
            return sibling
    return None


def _examples_by_pairing(page: ParsedPage) -> list[ExamplePair]:
    pairs = (
        (source_el, _translation_after(source_el))
        for source_el in page.soup.select(C.EXAMPLE_SOURCE_SELECTOR)
    )
    return _collect_examples(pairs)


EXAMPLE_RULES: RuleChain[list[ExamplePair]] = RuleChain(
    "examples",
    [
        ("sentence_blocks", _examples_from_blocks),
        ("paired_sentences", _examples_by_pairing),
    ],
    default=lambda page: [],
)


class DictionaryExtractor(ExtractorInterface):
    """Turns a Bing Dictionary results page into a WordRecord"""

    def extract(self, html: str, query_term: str) -> WordRecord:
        """Parse ``html`` looked up for ``query_term``.

        Never raises for unexpected markup: missing sections come back as
        empty defaults and ``headword`` falls back to the query term.

        Raises:
            MalformedInputError: ``html`` is not a string
            WordValidationError: ``query_term`` is not a non-empty string
        """
        if not isinstance(html, str):
            raise MalformedInputError(
                "html", f"expected str, got {type(html).__name__}"
            )
        if not isinstance(query_term, str) or not query_term.strip():
            raise WordValidationError(
                query_term, "Query term must be a non-empty string"
            )

        page = parse_page(html, query_term.strip())

        senses = SENSE_RULES.apply(page)
        detailed = DetailedSenses(
            primary=PRIMARY_TRACK_RULES.apply(page),
            secondary=SECONDARY_TRACK_RULES.apply(page),
        )
        if detailed.is_empty and senses:
            logger.debug("No detailed tracks found, numbering concise senses instead")
            detailed = DetailedSenses(primary=synthesize_detailed_senses(senses))

        record = WordRecord(
            query_term=page.query_term,
            headword=HEADWORD_RULES.apply(page),
            phonetic_us=PHONETIC_US_RULES.apply(page),
            phonetic_uk=PHONETIC_UK_RULES.apply(page),
            audio_us=AUDIO_US_RULES.apply(page),
            audio_uk=AUDIO_UK_RULES.apply(page),
            inflection_note=INFLECTION_RULES.apply(page),
            word_forms=WORD_FORM_RULES.apply(page),
            senses=senses,
            detailed_senses=detailed,
            collocations=COLLOCATION_RULES.apply(page),
            synonyms=SYNONYM_RULES.apply(page),
            antonyms=ANTONYM_RULES.apply(page),
            examples=EXAMPLE_RULES.apply(page),
        )
        logger.debug(
            f"Extracted '{record.headword}' for '{record.query_term}': "
            f"{len(record.senses)} senses, {len(record.examples)} examples"
        )
        return record


_default_extractor = DictionaryExtractor()


def extract(html: str, query_term: str) -> WordRecord:
    """Module-level shortcut for DictionaryExtractor().extract"""
    return _default_extractor.extract(html, query_term)
