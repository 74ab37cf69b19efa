"""Compose AnkiTrans card fields from an extracted WordRecord.

Every field is rendered independently into an HTML snippet whose class
names match the AnkiTrans card stylesheet. Record text is escaped before it
is placed in markup. Display caps are fixed so the card stays bounded.
"""

from markupsafe import escape

from ..exceptions import WordValidationError
from ..models.field_set import FieldSet
from ..models.word_record import SenseGroup, WordRecord
from .constants import ComposerConstants
from .interfaces import ComposerInterface

K = ComposerConstants


def _e(value: str) -> str:
    return str(escape(value))


class FieldComposer(ComposerInterface):
    """Deterministic WordRecord -> FieldSet renderer"""

    def compose(self, query_term: str, record: WordRecord) -> FieldSet:
        """Render all eight card fields; absent sections become ``""``.

        Every field is HTML, the Word field included: the query term is kept
        verbatim but escaped, so ``don't`` becomes ``don&#39;t``.
        """
        if not isinstance(query_term, str) or not query_term.strip():
            raise WordValidationError(
                query_term, "Query term must be a non-empty string"
            )
        if not isinstance(record, WordRecord):
            raise TypeError(f"record must be a WordRecord, got {type(record).__name__}")

        return FieldSet(
            word=_e(query_term),
            phonetic=self.render_phonetic(record),
            inflections=self.render_inflections(query_term, record),
            translation=self.render_translation(record),
            domain_defs=self.render_domain_defs(record),
            collocations=self.render_collocations(record),
            synonyms=self.render_synonyms(record),
            example=self.render_examples(record),
        )

    def render_inflections(self, query_term: str, record: WordRecord) -> str:
        # The prose note wins over the base-form notice
        if record.inflection_note:
            return (
                f'<div class="inflection-tips">{K.INFO_MARK} '
                f"{_e(record.inflection_note)}</div>"
            )
        if record.headword and record.headword.lower() != query_term.strip().lower():
            return (
                f'<div class="inflection-tips">{K.INFO_MARK} {K.BASE_FORM_LABEL} '
                f"<b>{_e(record.headword)}</b></div>"
            )
        return ""

    def render_phonetic(self, record: WordRecord) -> str:
        parts = []
        if record.phonetic_us:
            parts.append(
                f'<span class="ph-us">{K.US_MARK} /{_e(record.phonetic_us)}/</span>'
            )
        if record.phonetic_uk:
            parts.append(
                f'<span class="ph-uk">{K.UK_MARK} /{_e(record.phonetic_uk)}/</span>'
            )
        return " ".join(parts)

    def render_translation(self, record: WordRecord) -> str:
        lines = [
            '<div class="mean-line">'
            f'<span class="pos-tag">{_e(sense.part_of_speech)}</span> '
            f'<span class="mean-text">'
            f"{_e(K.MEANING_JOINER.join(sense.meanings))}</span>"
            "</div>"
            for sense in record.senses
        ]
        return "".join(lines)

    def _render_track(self, label: str, groups: list[SenseGroup]) -> str:
        if not groups:
            return ""
        blocks = []
        for group in groups[: K.MAX_DETAIL_GROUPS]:
            items = "".join(
                f'<li class="domain-li"><span class="num">{_e(item.index)}.</span> '
                f"{_e(item.text)}</li>"
                for item in group.numbered_defs[: K.MAX_DETAIL_DEFS]
            )
            blocks.append(
                '<div class="domain-group">'
                f'<div class="domain-pos">{_e(group.part_of_speech)}</div>'
                f'<ul class="domain-ul">{items}</ul>'
                "</div>"
            )
        return f'<div class="def-category-title">{label}</div>' + "".join(blocks)

    def render_domain_defs(self, record: WordRecord) -> str:
        tracks = [
            self._render_track(K.PRIMARY_TRACK_LABEL, record.detailed_senses.primary),
            self._render_track(
                K.SECONDARY_TRACK_LABEL, record.detailed_senses.secondary
            ),
        ]
        return K.TRACK_DIVIDER.join(track for track in tracks if track)

    def render_collocations(self, record: WordRecord) -> str:
        rows = []
        for group in record.collocations[: K.MAX_COLLOCATION_GROUPS]:
            items = "".join(
                f'<span class="col-tag">{_e(item)}</span>'
                for item in group.items[: K.MAX_COLLOCATION_ITEMS]
            )
            rows.append(
                '<div class="col-row">'
                f'<span class="col-type">{_e(group.relation_type)}</span>'
                f'<div class="col-items">{items}</div>'
                "</div>"
            )
        return "".join(rows)

    def render_synonyms(self, record: WordRecord) -> str:
        rows = []
        if record.synonyms:
            values = K.LIST_JOINER.join(record.synonyms[: K.MAX_SYNONYMS])
            rows.append(
                '<div class="syn-row">'
                f'<span class="syn-label">{K.SYNONYMS_LABEL}</span>'
                f'<span class="syn-vals">{_e(values)}</span>'
                "</div>"
            )
        if record.antonyms:
            values = K.LIST_JOINER.join(record.antonyms[: K.MAX_ANTONYMS])
            rows.append(
                '<div class="syn-row">'
                f'<span class="ant-label">{K.ANTONYMS_LABEL}</span>'
                f'<span class="syn-vals">{_e(values)}</span>'
                "</div>"
            )
        return "".join(rows)

    def render_examples(self, record: WordRecord) -> str:
        pairs = [
            '<div class="ex-pair">'
            f'<div class="ex-en">{_e(example.source)}</div>'
            f'<div class="ex-cn">{_e(example.target)}</div>'
            "</div>"
            for example in record.examples[: K.MAX_EXAMPLES]
        ]
        return "".join(pairs)


def primary_meaning(record: WordRecord | None) -> str:
    """First concise meaning of the record, or ``""``"""
    if record is None or not record.senses:
        return ""
    meanings = record.senses[0].meanings
    return meanings[0] if meanings else ""


_default_composer = FieldComposer()


def compose(query_term: str, record: WordRecord) -> FieldSet:
    """Module-level shortcut for FieldComposer().compose"""
    return _default_composer.compose(query_term, record)
