"""Form input model feeding the template generator.

Each input is a :class:`FormField`, a two-state object: it either shows its
default value or holds text the user typed. Focusing a field that shows its
default clears it for editing; blurring a blank field reverts it to the
default. :class:`FormState` groups the fields, keeps an ordered list of colour
rows that can grow one row at a time, and turns the current values into a
validated :class:`~boilerplate_forge.config.SiteConfig`.

Examples
--------
>>> form = FormState.from_defaults(FormDefaults())
>>> form.font_family.value
'Roboto'
>>> form.font_family.focus()
>>> form.font_family.blur()
>>> form.font_family.state is FieldState.DEFAULT_SHOWN
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum

from .config import FormDefaults, SiteConfig
from .config.helpers import _optional_str, _parse_color_assignment, _split_weights


class FieldState(enum.Enum):
    """Whether a field displays its default or user-entered text."""

    DEFAULT_SHOWN = "default-shown"
    USER_EDITED = "user-edited"


@dc.dataclass(slots=True)
class FormField:
    """A single text input that falls back to its default when left blank."""

    default: str
    state: FieldState = FieldState.DEFAULT_SHOWN
    _text: str = ""

    def focus(self) -> None:
        """Clear a default-shown field so the user can type into it."""
        if self.state is FieldState.DEFAULT_SHOWN:
            self.state = FieldState.USER_EDITED
            self._text = ""

    def edit(self, text: str) -> None:
        """Replace the field contents with user text."""
        self.state = FieldState.USER_EDITED
        self._text = text

    def blur(self) -> None:
        """Revert to the default when the user left the field blank."""
        if self.state is FieldState.USER_EDITED and not self._text.strip():
            self.state = FieldState.DEFAULT_SHOWN
            self._text = ""

    def set(self, text: str) -> None:
        """Apply a complete focus/edit/blur cycle, as a user filling the field."""
        self.focus()
        self.edit(text)
        self.blur()

    @property
    def value(self) -> str:
        """Return the text currently shown in the field."""
        if self.state is FieldState.DEFAULT_SHOWN:
            return self.default
        return self._text


@dc.dataclass(slots=True)
class ColorRow:
    """One colour variable row: a property name and its value."""

    name: FormField
    value: FormField

    @classmethod
    def create(cls, name: str = "", value: str = "") -> ColorRow:
        return cls(name=FormField(name), value=FormField(value))


@dc.dataclass(slots=True)
class FormState:
    """Every input of the boilerplate form."""

    font_family: FormField
    font_weights: FormField
    font_size: FormField
    line_height: FormField
    language: FormField
    title: FormField
    author: FormField
    description: FormField
    favicon: FormField
    color_rows: list[ColorRow] = dc.field(default_factory=list)
    include_sample_content: bool = False
    extra_scripts: list[str] = dc.field(default_factory=list)

    @classmethod
    def from_defaults(cls, defaults: FormDefaults) -> FormState:
        """Build a fresh form showing ``defaults`` in every field."""
        return cls(
            font_family=FormField(defaults.font_family),
            font_weights=FormField(defaults.font_weights),
            font_size=FormField(defaults.font_size),
            line_height=FormField(defaults.line_height),
            language=FormField(defaults.language),
            title=FormField(defaults.title),
            author=FormField(defaults.author),
            description=FormField(defaults.description),
            favicon=FormField(defaults.favicon),
            color_rows=[ColorRow.create(name, value) for name, value in defaults.colors],
            include_sample_content=defaults.include_sample_content,
            extra_scripts=list(defaults.extra_scripts),
        )

    def add_color_row(self, name: str = "", value: str = "") -> ColorRow:
        """Append an empty (or pre-filled) colour row and return it."""
        row = ColorRow.create(name, value)
        self.color_rows.append(row)
        return row

    def apply_colors(self, assignments: cabc.Iterable[str]) -> None:
        """Apply ``name=value`` assignments, editing existing rows by name.

        Names not yet present get a new row at the end of the list.
        """
        for assignment in assignments:
            name, value = _parse_color_assignment(assignment)
            row = self._find_color_row(name)
            if row is None:
                row = self.add_color_row()
                row.name.set(name)
            row.value.set(value)

    def colors(self) -> dict[str, str]:
        """Return the colour rows as an ordered mapping.

        Rows missing a name or a value are skipped.
        """
        colors: dict[str, str] = {}
        for row in self.color_rows:
            name = row.name.value.strip()
            value = row.value.value.strip()
            if not name or not value:
                continue
            colors[name] = value
        return colors

    def to_site_config(self) -> SiteConfig:
        """Return the validated configuration for the current field values.

        Raises
        ------
        UnsupportedFontWeightError
            If any requested weight is outside the accepted set.
        SiteConfigError
            If the font family is blank.
        """
        return SiteConfig(
            font_family=self.font_family.value.strip(),
            font_weights=_split_weights(self.font_weights.value),
            font_size_base=self.font_size.value.strip(),
            line_height=_optional_str(self.line_height.value),
            language_tag=self.language.value.strip(),
            page_title=self.title.value.strip(),
            author=_optional_str(self.author.value),
            meta_description=_optional_str(self.description.value),
            favicon_path=_optional_str(self.favicon.value),
            color_variables=self.colors(),
            include_sample_content=self.include_sample_content,
            extra_script_urls=tuple(
                url for url in (text.strip() for text in self.extra_scripts) if url
            ),
        )

    def _find_color_row(self, name: str) -> ColorRow | None:
        wanted = name.strip().removeprefix("--")
        for row in self.color_rows:
            if row.name.value.strip().removeprefix("--") == wanted:
                return row
        return None


__all__ = ["ColorRow", "FieldState", "FormField", "FormState"]
