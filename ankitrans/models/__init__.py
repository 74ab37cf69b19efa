"""Data models for the AnkiTrans application"""

from .field_set import FIELD_NAMES, FieldSet
from .word_record import (
    Collocation,
    DetailedSenses,
    ExamplePair,
    NumberedDef,
    Sense,
    SenseGroup,
    WordForm,
    WordRecord,
)

__all__ = [
    "WordRecord",
    "WordForm",
    "Sense",
    "SenseGroup",
    "NumberedDef",
    "DetailedSenses",
    "Collocation",
    "ExamplePair",
    "FieldSet",
    "FIELD_NAMES",
]
