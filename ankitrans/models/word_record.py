"""Pydantic models for the lexical record extracted from a dictionary page"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.constants import ExtractionConstants


class WordForm(BaseModel):
    """A labelled morphological form, e.g. 复数 -> applications"""

    model_config = ConfigDict(frozen=True)

    label: str = Field(description="Form label as shown on the page")
    value: str = Field(description="The inflected form")


class Sense(BaseModel):
    """Concise meanings grouped under one part of speech"""

    model_config = ConfigDict(frozen=True)

    part_of_speech: str = Field(default="", description="POS tag, e.g. n.")
    meanings: list[str] = Field(default_factory=list, description="Short glosses")

    @field_validator("meanings")
    @classmethod
    def validate_meanings(cls, v: list[str]) -> list[str]:
        """Drop blank glosses"""
        return [m.strip() for m in v if m and m.strip()]


class NumberedDef(BaseModel):
    """One numbered entry of a detailed definition group"""

    model_config = ConfigDict(frozen=True)

    index: str = Field(description="Display number, e.g. '1'")
    text: str = Field(description="Plain-text definition")


class SenseGroup(BaseModel):
    """Numbered detailed definitions under one part of speech"""

    model_config = ConfigDict(frozen=True)

    part_of_speech: str = Field(default="", description="POS tag")
    numbered_defs: list[NumberedDef] = Field(default_factory=list)


class DetailedSenses(BaseModel):
    """The two independently sourced detailed definition tracks"""

    model_config = ConfigDict(frozen=True)

    primary: list[SenseGroup] = Field(
        default_factory=list, description="Bilingual (英汉) track"
    )
    secondary: list[SenseGroup] = Field(
        default_factory=list, description="Monolingual (英英) track"
    )

    @property
    def is_empty(self) -> bool:
        return not self.primary and not self.secondary


class Collocation(BaseModel):
    """Co-occurring words grouped by relation, e.g. v.+n."""

    model_config = ConfigDict(frozen=True)

    relation_type: str = Field(default="", description="Relation label")
    items: list[str] = Field(default_factory=list)


class ExamplePair(BaseModel):
    """Example sentence with its translation"""

    model_config = ConfigDict(frozen=True)

    source: str = Field(description="Source-language sentence")
    target: str = Field(description="Target-language sentence")


class WordRecord(BaseModel):
    """Structured result of parsing one dictionary results page.

    Absent sections are empty collections, never ``None``, so consumers can
    treat every field uniformly.
    """

    model_config = ConfigDict(frozen=True)

    query_term: str = Field(description="The term as submitted")
    headword: str = Field(description="Canonical dictionary form")
    phonetic_us: str = Field(default="", description="US transcription, no brackets")
    phonetic_uk: str = Field(default="", description="UK transcription, no brackets")
    audio_us: str = Field(default="", description="Absolute US audio URL")
    audio_uk: str = Field(default="", description="Absolute UK audio URL")
    inflection_note: str = Field(default="", description="Morphology note")
    word_forms: list[WordForm] = Field(default_factory=list)
    senses: list[Sense] = Field(default_factory=list)
    detailed_senses: DetailedSenses = Field(default_factory=DetailedSenses)
    collocations: list[Collocation] = Field(default_factory=list)
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)
    examples: list[ExamplePair] = Field(default_factory=list)

    @field_validator("query_term")
    @classmethod
    def validate_query_term(cls, v: str) -> str:
        """Ensure the query term is not empty"""
        if not v or not v.strip():
            raise ValueError("Query term cannot be empty")
        return v.strip()

    @field_validator("headword")
    @classmethod
    def validate_headword(cls, v: str) -> str:
        """Ensure the headword is not empty"""
        if not v or not v.strip():
            raise ValueError("Headword cannot be empty")
        return v.strip()

    @field_validator("synonyms", "antonyms")
    @classmethod
    def validate_word_sets(cls, v: list[str]) -> list[str]:
        """Keep first occurrence of each exact term"""
        from ..core.text_processor import TextProcessor

        return TextProcessor.ordered_unique(w.strip() for w in v if w)

    @field_validator("examples")
    @classmethod
    def validate_examples(cls, v: list[ExamplePair]) -> list[ExamplePair]:
        """Keep the first MAX_EXAMPLES pairs in page order"""
        return v[: ExtractionConstants.MAX_EXAMPLES]

    @property
    def is_empty_result(self) -> bool:
        """True when nothing beyond the query term itself was recognised"""
        return self.headword == self.query_term and not self.senses

    @property
    def has_definitions(self) -> bool:
        return bool(self.senses) or not self.detailed_senses.is_empty
