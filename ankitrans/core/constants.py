"""Shared constants across the application"""


class DictionaryConstants:
    """Constants for fetching Bing Dictionary results pages"""

    SITE_ROOT = "https://cn.bing.com"
    SOURCE_NAME = "cn.bing.com/dict"

    DEFAULT_HEADERS = {
        "Accept": "text/html,application/xhtml+xml",
    }


class ExtractionConstants:
    """Markup knowledge of the Bing Dictionary results page.

    Each group lists selectors in fallback order: the current layout first,
    older layouts after it.
    """

    HEADWORD_SELECTORS = (
        "div#headword h1 strong",
        "span.hw",
        "div.hd_div h1",
    )

    INFLECTION_TIP_SELECTOR = "div.in_tip"

    PHONETIC_US_SELECTOR = ".hd_prUS"
    PHONETIC_UK_SELECTOR = ".hd_pr.b_primtxt"
    LEGACY_PHONETIC_SELECTOR = ".hd_p1_1"
    # Raw markup patterns used when the element text does not carry the brackets.
    # The scan stays within inline markup: it stops at any div boundary and at
    # the next hd_pr element so a neighbouring transcription is never taken.
    PHONETIC_US_MARKUP_PATTERN = (
        r'class="hd_prUS[^"]*"[^>]*>'
        r"(?:[^<\[]|<(?!/?div\b)(?![^>]*hd_pr)[^>]*>)*?\[([^\]]+)\]"
    )
    PHONETIC_UK_MARKUP_PATTERN = (
        r'class="hd_pr b_primtxt"[^>]*>'
        r"(?:[^<\[]|<(?!/?div\b)(?![^>]*hd_pr)[^>]*>)*?\[([^\]]+)\]"
    )
    LEGACY_PHONETIC_US_PATTERN = r"美\s*\[([^\]]+)\]"
    LEGACY_PHONETIC_UK_PATTERN = r"英\s*\[([^\]]+)\]"
    BRACKETED_PATTERN = r"\[([^\]]+)\]"

    AUDIO_US_ID = "bigaud_us"
    AUDIO_UK_ID = "bigaud_uk"
    AUDIO_LINK_ATTR = "data-mp3link"
    LEGACY_AUDIO_ATTRS = ("onclick", "onmouseover")
    AUDIO_URL_PATTERN = r"""['"]((?:https?:)?/[^'"]+?\.mp3[^'"]*)['"]"""

    WORD_FORMS_SELECTORS = ("div.hd_div1 div.hd_if", "div.hd_if")
    WORD_FORM_LABEL_SELECTOR = "span.b_primtxt"

    CONCISE_SENSE_SELECTORS = ("div.qdef li", "li")
    CONCISE_POS_SELECTOR = "span.pos"
    CONCISE_DEF_SELECTOR = "span.def"

    PRIMARY_TRACK_ID = "crossid"
    SECONDARY_TRACK_ID = "homoid"
    DETAILED_ROW_SELECTORS = ("tr.def_row", "div.def_row")
    DETAILED_POS_SELECTOR = "div.pos"
    DETAILED_NUMBER_SELECTOR = "div.se_d"
    DETAILED_TEXT_CLASSES = ("df_cr_w", "de_co")
    DETAILED_NUMBER_PATTERN = r"(\d+)\s*\."

    COLLOCATION_SECTION_ID = "colid"
    COLLOCATION_TITLE_SELECTOR = "div.de_title2"
    COLLOCATION_ITEMS_CLASS = "col_fl"

    SYNONYM_SECTION_ID = "synoid"
    ANTONYM_SECTION_ID = "antoid"
    RELATED_WORD_SELECTOR = "span.p1-4.b_alink"

    EXAMPLE_BLOCK_SELECTOR = "div.se_li"
    EXAMPLE_SOURCE_SELECTOR = "div.sen_en"
    EXAMPLE_TARGET_SELECTOR = "div.sen_cn"
    EXAMPLE_SOURCE_CLASS = "sen_en"
    EXAMPLE_TARGET_CLASS = "sen_cn"
    MAX_EXAMPLES = 3

    # Concise glosses list short synonyms separated by CJK or ASCII semicolons
    MEANING_SEPARATOR_PATTERN = r"[；;]"
    INFLECTION_PAIR_SEPARATOR = "; "


class ComposerConstants:
    """Display caps and labels for the composed card fields"""

    MAX_DETAIL_GROUPS = 3
    MAX_DETAIL_DEFS = 4
    MAX_COLLOCATION_GROUPS = 3
    MAX_COLLOCATION_ITEMS = 5
    MAX_SYNONYMS = 8
    MAX_ANTONYMS = 5
    MAX_EXAMPLES = 3

    PRIMARY_TRACK_LABEL = "英汉释义"
    SECONDARY_TRACK_LABEL = "英英释义"
    BASE_FORM_LABEL = "原型为"
    SYNONYMS_LABEL = "同义词"
    ANTONYMS_LABEL = "反义词"
    INFO_MARK = "ℹ️"
    US_MARK = "🇺🇸"
    UK_MARK = "🇬🇧"

    MEANING_JOINER = "；"
    TRACK_DIVIDER = "<br/>"
    LIST_JOINER = ", "


class TextConstants:
    """Constants for text processing"""

    WHITESPACE_PATTERN = r"\s+"
    HTML_TAG_PATTERN = r"<[^>]+>"

    # Entities decoded in HTML-bearing captures; &amp; goes last so the
    # result is decoded exactly once
    HTML_ENTITIES: tuple[tuple[str, str], ...] = (
        ("&nbsp;", " "),
        ("&#160;", " "),
        ("&lt;", "<"),
        ("&gt;", ">"),
        ("&quot;", '"'),
        ("&#34;", '"'),
        ("&#39;", "'"),
        ("&apos;", "'"),
        ("&amp;", "&"),
    )


class AnkiConstants:
    """Constants for the AnkiTrans note type"""

    CARD_TEMPLATE_NAME = "AnkiTrans Card"
