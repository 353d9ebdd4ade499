"""Utilities for rendering the boilerplate HTML, CSS, and script files."""

from .builder import BoilerplateGenerator, generate
from .fragments import (
    FontLinks,
    build_color_declarations,
    build_font_links,
    font_stylesheet_href,
    format_color_value,
)
from .models import Artifact, ArtifactSet

__all__ = [
    "Artifact",
    "ArtifactSet",
    "BoilerplateGenerator",
    "FontLinks",
    "build_color_declarations",
    "build_font_links",
    "font_stylesheet_href",
    "format_color_value",
    "generate",
]
