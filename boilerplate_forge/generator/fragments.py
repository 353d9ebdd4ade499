"""Pure helpers that build the font and colour fragments of the templates."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc

from markupsafe import Markup, escape

from boilerplate_forge._constants import GOOGLE_FONTS_API, GOOGLE_FONTS_STATIC
from boilerplate_forge.fonts import family_query

PRECONNECT_LINKS = (
    Markup(f'<link rel="preconnect" href="{GOOGLE_FONTS_API}">'),
    Markup(f'<link rel="preconnect" href="{GOOGLE_FONTS_STATIC}" crossorigin>'),
)


@dc.dataclass(frozen=True, slots=True)
class FontLinks:
    """Link tags that load the chosen web font."""

    preconnect: tuple[Markup, ...]
    stylesheet_href: str

    @property
    def stylesheet(self) -> Markup:
        return Markup('<link href="{}" rel="stylesheet">').format(
            Markup(self.stylesheet_href)
        )


def font_stylesheet_href(family: str, weights: cabc.Sequence[str]) -> str:
    """Return the Google Fonts stylesheet URL for ``family`` and ``weights``.

    Examples
    --------
    >>> font_stylesheet_href("Open Sans", ["400", "700"])
    'https://fonts.googleapis.com/css2?family=Open+Sans:wght@400;700&display=swap'
    """
    family_param = str(escape(family_query(family)))
    return (
        f"{GOOGLE_FONTS_API}/css2?family={family_param}"
        f":wght@{';'.join(weights)}&display=swap"
    )


def build_font_links(family: str, weights: cabc.Sequence[str]) -> FontLinks:
    """Return the preconnect and stylesheet links for the chosen font."""
    return FontLinks(
        preconnect=PRECONNECT_LINKS,
        stylesheet_href=font_stylesheet_href(family, weights),
    )


def format_color_value(value: str) -> str:
    """Wrap comma separated components as ``hsl(...)``; keep other values as-is.

    A comma is taken to mean an HSL triple such as ``210, 50%, 50%``. Values
    like ``rgba(0,0,0,.5)`` also contain commas and get wrapped too.

    Examples
    --------
    >>> format_color_value("210,50%,50%")
    'hsl(210,50%,50%)'
    >>> format_color_value("#ff6600")
    '#ff6600'
    """
    if "," in value:
        return f"hsl({value})"
    return value


def build_color_declarations(colors: cabc.Mapping[str, str]) -> list[str]:
    """Return one custom property declaration per colour, in mapping order."""
    return [f"{name}: {format_color_value(value)};" for name, value in colors.items()]


__all__ = [
    "PRECONNECT_LINKS",
    "FontLinks",
    "build_color_declarations",
    "build_font_links",
    "font_stylesheet_href",
    "format_color_value",
]
