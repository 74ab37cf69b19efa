"""Tests for the AnkiTrans note type definition"""

import pytest

from ankitrans.exceptions import ConfigurationError
from ankitrans.models import FIELD_NAMES
from ankitrans.templates.card_template import AnkiTransCardTemplate
from ankitrans.templates.loader import load_card_visuals


def test_fields_follow_field_set_order():
    assert AnkiTransCardTemplate().fields == list(FIELD_NAMES)


def test_card_type_payload():
    card_type = AnkiTransCardTemplate(model_name="Custom").create_card_type()
    assert card_type["modelName"] == "Custom"
    assert card_type["inOrderFields"] == list(FIELD_NAMES)
    assert card_type["cardTemplates"][0]["Name"] == "AnkiTrans Card"
    assert ".card" in card_type["css"]


def test_mustache_placeholders_survive_rendering():
    front, back, _ = load_card_visuals()
    assert "{{Word}}" in front
    assert "{{#Phonetic}}" in front and "{{/Phonetic}}" in front
    assert "{{Translation}}" in back
    for name in ("DomainDefs", "Collocations", "Synonyms", "Example"):
        assert "{{#%s}}" % name in back
        assert "{{%s}}" % name in back
        assert "{{/%s}}" % name in back
    # No template syntax leaks into the output
    assert "[[" not in back and "[%" not in back


def test_every_note_field_is_referenced():
    front, back, _ = load_card_visuals()
    for name in FIELD_NAMES:
        assert "{{%s}}" % name in front + back


def test_override_directory(tmp_path):
    (tmp_path / "style.css.j2").write_text(".card { color: red; }", encoding="utf-8")
    front, _, css = load_card_visuals(tmp_path)
    assert css == ".card { color: red; }"
    assert "{{Word}}" in front


def test_missing_override_directory(tmp_path):
    with pytest.raises(ConfigurationError):
        load_card_visuals(tmp_path / "missing")
