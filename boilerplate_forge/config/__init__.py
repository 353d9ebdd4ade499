"""Load and validate the choices that drive a boilerplate run.

This subpackage defines :class:`SiteConfig`, the immutable input of the
template generator, the font-weight gate that guards it, and
:class:`FormDefaults`, the initial value of every form field. Defaults can be
read from a YAML file with :func:`load_form_defaults`.

Examples
--------
>>> from boilerplate_forge.config import SiteConfig
>>> config = SiteConfig(
...     font_family="Roboto",
...     font_weights=("400", "700"),
...     font_size_base="100%",
...     language_tag="en",
...     page_title="Demo",
...     color_variables={"primary": "210,50%,50%"},
... )
>>> list(config.color_variables)
['--primary']
"""

from .loader import DEFAULT_CONFIG, load_form_defaults
from .models import (
    FormDefaults,
    SiteConfig,
    SiteConfigError,
    UnsupportedFontWeightError,
    custom_property_name,
    validate_font_weights,
)

__all__ = [
    "DEFAULT_CONFIG",
    "FormDefaults",
    "SiteConfig",
    "SiteConfigError",
    "UnsupportedFontWeightError",
    "custom_property_name",
    "load_form_defaults",
    "validate_font_weights",
]
