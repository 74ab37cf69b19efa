"""Template loader with a Jinja2-based layout.

Packaged visuals live in ``ankitrans/templates/base``:
  - front.html.j2
  - back.html.j2
  - style.css.j2
  - header.html.j2 (shared by both sides)

A filesystem directory may override any of these; missing files fall back
to the packaged base.

Jinja2 uses custom delimiters so Anki's Mustache ``{{Field}}`` placeholders
and ``{{#Field}}...{{/Field}}`` sections remain untouched.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from ..exceptions import ConfigurationError

VISUAL_FILES = ("front.html.j2", "back.html.j2", "style.css.j2")


def _build_env(loader: BaseLoader) -> Environment:
    return Environment(
        loader=loader,
        autoescape=False,
        # Use custom delimiters to avoid clashing with Anki/Mustache {{...}} and {{#...}} syntax
        variable_start_string="[[",
        variable_end_string="]]",
        block_start_string="[%",
        block_end_string="%]",
        comment_start_string="[#",
        comment_end_string="#]",
        trim_blocks=True,
        lstrip_blocks=True,
    )


def _render_visuals(env: Environment) -> tuple[str, str, str]:
    front, back, css = (
        env.get_template(name).render().strip() for name in VISUAL_FILES
    )
    return front, back, css


@lru_cache(maxsize=8)
def _load_card_visuals_cached(template_dir: str | None) -> tuple[str, str, str]:
    base = PackageLoader("ankitrans", "templates/base")
    if template_dir is None:
        return _render_visuals(_build_env(base))
    # Chain loaders: override directory -> packaged base
    loader = ChoiceLoader([FileSystemLoader(template_dir), base])
    return _render_visuals(_build_env(loader))


def load_card_visuals(template_dir: str | Path | None = None) -> tuple[str, str, str]:
    """Return (front, back, css) for the packaged base or an override directory.

    Raises:
        ConfigurationError: the override path is not a directory
    """
    if template_dir is None:
        return _load_card_visuals_cached(None)

    path = Path(template_dir)
    if not path.is_dir():
        raise ConfigurationError(
            "template_dir", str(template_dir), "Template directory does not exist"
        )
    # Normalise so the cache key is stable
    return _load_card_visuals_cached(str(path.resolve()))
