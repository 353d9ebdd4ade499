"""Load form defaults YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _coerce_colors,
    _coerce_strings,
    _coerce_weights,
    _optional_str,
    _section,
)
from .models import FormDefaults

DEFAULT_CONFIG = Path("config/boilerplate.yaml")


def load_form_defaults(path: Path) -> FormDefaults:
    """Load the YAML file describing the initial value of each form field.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML defaults file (for example,
        ``config/boilerplate.yaml``).

    Returns
    -------
    FormDefaults
        Built-in defaults overlaid with every value present in the file.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section or value has the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> defaults = load_form_defaults(Path("config/boilerplate.yaml"))  # doctest: +SKIP
    >>> defaults.font_family  # doctest: +SKIP
    'Roboto'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    base = FormDefaults()
    font = _section(raw, "font")
    page = _section(raw, "page")

    weights = font.get("weights")
    if weights is None:
        weights = base.font_weights

    colors = base.colors
    if "colors" in raw:
        colors = _coerce_colors(raw["colors"])

    return FormDefaults(
        font_family=_optional_str(font.get("family")) or base.font_family,
        font_weights=_coerce_weights(weights),
        font_size=_optional_str(font.get("size")) or base.font_size,
        line_height=_optional_str(font.get("line_height", base.line_height)) or "",
        language=_optional_str(page.get("language")) or base.language,
        title=_optional_str(page.get("title")) or base.title,
        author=_optional_str(page.get("author")) or "",
        description=_optional_str(page.get("description")) or "",
        favicon=_optional_str(page.get("favicon")) or base.favicon,
        colors=colors,
        include_sample_content=bool(
            raw.get("sample_content", base.include_sample_content)
        ),
        extra_scripts=_coerce_strings(raw.get("scripts"), field="scripts"),
    )


__all__ = ["DEFAULT_CONFIG", "load_form_defaults"]
