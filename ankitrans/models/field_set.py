"""The fixed set of card fields handed to the AnkiTrans note type"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Canonical field order of the AnkiTrans note type
FIELD_NAMES: tuple[str, ...] = (
    "Word",
    "Phonetic",
    "Inflections",
    "Translation",
    "DomainDefs",
    "Collocations",
    "Synonyms",
    "Example",
)


class FieldSet(BaseModel):
    """Rendered HTML snippets keyed by note field name.

    All eight fields are always present; an absent section is ``""``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    word: str = Field(
        default="",
        alias="Word",
        description="Query term as typed, HTML-escaped like every other field "
        "(don't becomes don&#39;t)",
    )
    phonetic: str = Field(default="", alias="Phonetic")
    inflections: str = Field(default="", alias="Inflections")
    translation: str = Field(default="", alias="Translation")
    domain_defs: str = Field(default="", alias="DomainDefs")
    collocations: str = Field(default="", alias="Collocations")
    synonyms: str = Field(default="", alias="Synonyms")
    example: str = Field(default="", alias="Example")

    @field_validator("*", mode="before")
    @classmethod
    def validate_values(cls, v: str | None) -> str:
        """Coerce missing values to empty strings"""
        return "" if v is None else str(v)

    def to_dict(self) -> dict[str, str]:
        """Plain mapping with exactly the note field names, in note order"""
        data = self.model_dump(by_alias=True)
        return {name: data[name] for name in FIELD_NAMES}
