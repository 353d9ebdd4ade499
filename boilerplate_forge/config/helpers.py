"""Utility helpers shared by the form-defaults loader and the form model."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _split_weights(value: str) -> tuple[str, ...]:
    """Split a ``;`` separated weight list into trimmed entries."""
    return tuple(segment.strip() for segment in value.split(";"))


def _coerce_weights(value: object) -> str:
    """Normalize YAML weights (``"400;700"`` or ``[400, 700]``) to text."""
    match value:
        case str():
            return value.strip()
        case int():
            return str(value)
        case list() | tuple():
            return ";".join(str(item).strip() for item in value)
        case _:
            msg = f"Font weights must be a string or a list, got {value!r}."
            raise SiteConfigError(msg)


def _coerce_colors(value: object) -> list[tuple[str, str]]:
    """Turn a YAML ``colors`` mapping into ordered ``(name, value)`` rows."""
    if value is None:
        return []
    if not isinstance(value, cabc.Mapping):
        msg = "The 'colors' section must be a mapping of name to value."
        raise SiteConfigError(msg)
    return [
        (str(name), "" if color is None else str(color))
        for name, color in value.items()
    ]


def _coerce_strings(value: object, *, field: str) -> list[str]:
    """Return a list of non-empty strings for list-valued YAML fields."""
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, cabc.Sequence):
        msg = f"The '{field}' entry must be a list of strings."
        raise SiteConfigError(msg)
    return [text for item in value if (text := str(item).strip())]


def _parse_color_assignment(text: str) -> tuple[str, str]:
    """Split a ``name=value`` colour assignment.

    Examples
    --------
    >>> _parse_color_assignment("primary=210, 50%, 50%")
    ('primary', '210, 50%, 50%')
    """
    name, sep, value = text.partition("=")
    if not sep or not name.strip():
        msg = f"Colour '{text}' must use the form name=value."
        raise SiteConfigError(msg)
    return name.strip(), value.strip()


def _section(raw: cabc.Mapping[str, typ.Any], key: str) -> cabc.Mapping[str, typ.Any]:
    """Return a nested mapping section, treating a missing one as empty."""
    section = raw.get(key) or {}
    if not isinstance(section, cabc.Mapping):
        msg = f"The '{key}' section must be a mapping."
        raise SiteConfigError(msg)
    return section


__all__ = [
    "_coerce_colors",
    "_coerce_strings",
    "_coerce_weights",
    "_optional_str",
    "_parse_color_assignment",
    "_section",
    "_split_weights",
]
