"""Typed dataclasses describing boilerplate site configuration structures."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc

from boilerplate_forge._constants import DEFAULT_FAVICON, FONT_WEIGHTS


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class UnsupportedFontWeightError(SiteConfigError):
    """Raised when requested font weights fall outside the accepted set.

    Attributes
    ----------
    invalid : tuple[str, ...]
        Offending weight values in the order they were requested.
    accepted : tuple[str, ...]
        The weight values the font service accepts.
    """

    def __init__(
        self, invalid: cabc.Sequence[str], accepted: cabc.Sequence[str] = FONT_WEIGHTS
    ) -> None:
        self.invalid = tuple(invalid)
        self.accepted = tuple(accepted)
        msg = (
            "The following font-weights may not be supported: "
            f"{', '.join(self.invalid)}. Use one of: {', '.join(self.accepted)}"
        )
        super().__init__(msg)


def validate_font_weights(weights: cabc.Sequence[str]) -> None:
    """Raise :class:`UnsupportedFontWeightError` for any unknown weight.

    Parameters
    ----------
    weights : Sequence[str]
        Requested weights, for example ``("400", "700")``.

    Raises
    ------
    UnsupportedFontWeightError
        If one or more values are not in ``FONT_WEIGHTS``. The ``invalid``
        attribute lists exactly those values.

    Examples
    --------
    >>> validate_font_weights(["400", "700"])
    >>> try:
    ...     validate_font_weights(["450", "700"])
    ... except UnsupportedFontWeightError as exc:
    ...     exc.invalid
    ('450',)
    """
    invalid = [weight for weight in weights if weight not in FONT_WEIGHTS]
    if invalid:
        raise UnsupportedFontWeightError(invalid)


def custom_property_name(name: str) -> str:
    """Return ``name`` as a CSS custom property name (``primary`` -> ``--primary``)."""
    stripped = name.strip()
    if stripped.startswith("--"):
        return stripped
    return f"--{stripped}"


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """A validated set of choices that drives one generator run."""

    font_family: str
    font_weights: tuple[str, ...]
    font_size_base: str
    language_tag: str
    page_title: str
    color_variables: dict[str, str] = dc.field(default_factory=dict)
    line_height: str | None = None
    author: str | None = None
    meta_description: str | None = None
    favicon_path: str | None = None
    include_sample_content: bool = False
    extra_script_urls: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.font_family.strip():
            msg = "A font family is required."
            raise SiteConfigError(msg)
        weights = tuple(str(weight) for weight in self.font_weights)
        if not weights:
            msg = "At least one font weight is required."
            raise SiteConfigError(msg)
        validate_font_weights(weights)

        colors: dict[str, str] = {}
        for name, value in self.color_variables.items():
            colors[custom_property_name(name)] = value
        object.__setattr__(self, "font_weights", weights)
        object.__setattr__(self, "color_variables", colors)
        object.__setattr__(self, "extra_script_urls", tuple(self.extra_script_urls))

    @property
    def body_weight(self) -> str:
        """Return the weight applied to the ``body`` rule."""
        return self.font_weights[0]

    @property
    def favicon_href(self) -> str:
        """Return the favicon path, falling back to ``favicon.ico``."""
        return self.favicon_path or DEFAULT_FAVICON


@dc.dataclass(slots=True)
class FormDefaults:
    """Initial value of every form field at the start of a run."""

    font_family: str = "Roboto"
    font_weights: str = "400;700"
    font_size: str = "100%"
    line_height: str = "1.5"
    language: str = "en"
    title: str = "My Website"
    author: str = ""
    description: str = ""
    favicon: str = DEFAULT_FAVICON
    colors: list[tuple[str, str]] = dc.field(
        default_factory=lambda: [
            ("primary", "210, 50%, 50%"),
            ("secondary", "150, 40%, 45%"),
            ("accent", "30, 90%, 55%"),
            ("background", "0, 0%, 100%"),
            ("text", "0, 0%, 15%"),
        ]
    )
    include_sample_content: bool = False
    extra_scripts: list[str] = dc.field(default_factory=list)


__all__ = [
    "FormDefaults",
    "SiteConfig",
    "SiteConfigError",
    "UnsupportedFontWeightError",
    "custom_property_name",
    "validate_font_weights",
]
