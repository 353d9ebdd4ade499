"""Render a :class:`SiteConfig` into the four boilerplate files.

:class:`BoilerplateGenerator` wires a Jinja2 environment over the package
templates and turns one configuration into an :class:`ArtifactSet`. The run is
pure: no network access, no filesystem writes, and identical configurations
always produce byte-identical files. ``reset.css`` and ``script.js`` do not
depend on the configuration at all and are rendered once per generator.

Example
-------
>>> from boilerplate_forge.config import SiteConfig
>>> from boilerplate_forge.generator import BoilerplateGenerator
>>> config = SiteConfig(
...     font_family="Roboto",
...     font_weights=("400", "700"),
...     font_size_base="100%",
...     language_tag="en",
...     page_title="Demo",
... )
>>> artifacts = BoilerplateGenerator().generate(config)
>>> artifacts.names
('index.html', 'styles.css', 'script.js', 'reset.css')
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .fragments import build_color_declarations, build_font_links
from .models import Artifact, ArtifactSet

if typ.TYPE_CHECKING:
    from boilerplate_forge.config import SiteConfig


class BoilerplateGenerator:
    """Render boilerplate artifacts from structured configuration."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment and render the constant files.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing the ``*.jinja`` templates. Defaults to the
            ``templates`` directory shipped with the package.

        Notes
        -----
        Autoescaping is enabled for the HTML template only; the stylesheet and
        script templates emit configuration values verbatim.
        """
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(
                enabled_extensions=("html.jinja",), default_for_string=False
            ),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.html_template = self.env.get_template("index.html.jinja")
        self.styles_template = self.env.get_template("styles.css.jinja")
        self.script_js = _with_newline(self.env.get_template("script.js.jinja").render())
        self.reset_css = _with_newline(self.env.get_template("reset.css.jinja").render())

    def generate(self, config: SiteConfig) -> ArtifactSet:
        """Return the four artifacts for ``config``.

        Parameters
        ----------
        config : SiteConfig
            Validated site configuration.

        Returns
        -------
        ArtifactSet
            ``index.html``, ``styles.css``, ``script.js`` and ``reset.css`` in
            that order, each ending with a single newline.
        """
        return ArtifactSet(
            (
                Artifact("index.html", self.render_html(config)),
                Artifact("styles.css", self.render_styles(config)),
                Artifact("script.js", self.script_js),
                Artifact("reset.css", self.reset_css),
            )
        )

    def render_html(self, config: SiteConfig) -> str:
        font_links = build_font_links(config.font_family, config.font_weights)
        html = self.html_template.render(config=config, font_links=font_links)
        return _with_newline(html)

    def render_styles(self, config: SiteConfig) -> str:
        declarations = build_color_declarations(config.color_variables)
        css = self.styles_template.render(
            config=config, color_declarations=declarations
        )
        return _with_newline(css)


def generate(config: SiteConfig) -> ArtifactSet:
    """Render ``config`` with a generator using the packaged templates."""
    return BoilerplateGenerator().generate(config)


def _with_newline(text: str) -> str:
    return text if text.endswith("\n") else f"{text}\n"


__all__ = ["BoilerplateGenerator", "generate"]
