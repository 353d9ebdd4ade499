"""Tests for the form field state machine and form-to-config conversion."""

from __future__ import annotations

import pytest

from boilerplate_forge.config import (
    FormDefaults,
    SiteConfigError,
    UnsupportedFontWeightError,
)
from boilerplate_forge.form import FieldState, FormField, FormState


def test_field_starts_showing_default() -> None:
    field = FormField("210, 50%, 50%")
    assert field.state is FieldState.DEFAULT_SHOWN
    assert field.value == "210, 50%, 50%"


def test_focus_clears_default_for_editing() -> None:
    field = FormField("Roboto")
    field.focus()
    assert field.state is FieldState.USER_EDITED
    assert field.value == ""


def test_blur_on_blank_field_reverts_to_default() -> None:
    field = FormField("Roboto")
    field.focus()
    field.edit("   ")
    field.blur()
    assert field.state is FieldState.DEFAULT_SHOWN
    assert field.value == "Roboto"


def test_blur_keeps_user_text() -> None:
    field = FormField("Roboto")
    field.focus()
    field.edit("Lato")
    field.blur()
    assert field.state is FieldState.USER_EDITED
    assert field.value == "Lato"


def test_focus_on_edited_field_keeps_text() -> None:
    field = FormField("Roboto")
    field.set("Lato")
    field.focus()
    assert field.value == "Lato"


def test_defaults_build_valid_config() -> None:
    config = FormState.from_defaults(FormDefaults()).to_site_config()
    assert config.font_family == "Roboto"
    assert config.font_weights == ("400", "700")
    assert list(config.color_variables) == [
        "--primary",
        "--secondary",
        "--accent",
        "--background",
        "--text",
    ]
    assert config.author is None
    assert config.meta_description is None
    assert config.line_height == "1.5"


def test_weights_are_split_and_trimmed() -> None:
    form = FormState.from_defaults(FormDefaults())
    form.font_weights.set(" 300 ; 500;700 ")
    assert form.to_site_config().font_weights == ("300", "500", "700")


def test_invalid_weight_blocks_config() -> None:
    form = FormState.from_defaults(FormDefaults())
    form.font_weights.set("400;450")
    with pytest.raises(UnsupportedFontWeightError) as excinfo:
        form.to_site_config()
    assert excinfo.value.invalid == ("450",)


def test_blank_family_blocks_config() -> None:
    form = FormState.from_defaults(FormDefaults(font_family=""))
    with pytest.raises(SiteConfigError):
        form.to_site_config()


def test_added_colour_rows_keep_order_and_skip_unnamed() -> None:
    form = FormState.from_defaults(FormDefaults(colors=[("primary", "1,2%,3%")]))
    form.add_color_row("surface", "#fafafa")
    form.add_color_row()
    form.add_color_row("muted", "gray")
    assert len(form.color_rows) == 4
    assert form.colors() == {
        "primary": "1,2%,3%",
        "surface": "#fafafa",
        "muted": "gray",
    }


def test_colour_rows_without_value_are_skipped() -> None:
    form = FormState.from_defaults(FormDefaults(colors=[("brand", "")]))
    form.add_color_row("surface", "   ")
    form.add_color_row("ink", "#111")
    assert form.colors() == {"ink": "#111"}
    config = form.to_site_config()
    assert config.color_variables == {"--ink": "#111"}


def test_apply_colors_edits_existing_rows_by_name() -> None:
    form = FormState.from_defaults(FormDefaults(colors=[("primary", "1,2%,3%")]))
    form.apply_colors(["--primary=200,10%,10%", "brand=#123456"])
    assert form.colors() == {"primary": "200,10%,10%", "brand": "#123456"}


def test_apply_colors_rejects_assignments_without_name() -> None:
    form = FormState.from_defaults(FormDefaults())
    with pytest.raises(SiteConfigError):
        form.apply_colors(["=red"])


def test_optional_fields_and_scripts() -> None:
    form = FormState.from_defaults(FormDefaults())
    form.author.set("Ada Lovelace")
    form.description.set("A small site")
    form.line_height.set("")
    form.extra_scripts.extend(["https://cdn.example.com/a.js", "  "])
    form.include_sample_content = True
    config = form.to_site_config()
    assert config.author == "Ada Lovelace"
    assert config.meta_description == "A small site"
    assert config.line_height == "1.5"
    assert config.extra_script_urls == ("https://cdn.example.com/a.js",)
    assert config.include_sample_content is True
