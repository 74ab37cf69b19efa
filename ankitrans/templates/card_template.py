"""AnkiTrans note type definition (fields + Jinja visuals)"""

from pathlib import Path
from typing import Any

from ..config.settings import settings
from ..core.constants import AnkiConstants
from ..models.field_set import FIELD_NAMES
from .loader import load_card_visuals


class AnkiTransCardTemplate:
    """Template for AnkiTrans cards.

    - Fields are the composed FieldSet keys, in note order
    - Visuals (front/back/css) are loaded from Jinja templates
    """

    def __init__(
        self, model_name: str | None = None, template_dir: str | Path | None = None
    ):
        self.model_name = model_name or settings.anki.model_name
        self.template_dir = template_dir

    @property
    def fields(self) -> list[str]:
        return list(FIELD_NAMES)

    def create_card_type(self) -> dict[str, Any]:
        """Create the complete note type configuration"""
        front, back, css = load_card_visuals(self.template_dir)
        return {
            "modelName": self.model_name,
            "inOrderFields": self.fields,
            "css": css,
            "cardTemplates": [
                {
                    "Name": AnkiConstants.CARD_TEMPLATE_NAME,
                    "Front": front,
                    "Back": back,
                }
            ],
        }
