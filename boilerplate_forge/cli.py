"""Cyclopts CLI entrypoint for generating static-site boilerplate files.

The ``boilerplate`` console script defined here fills the boilerplate form from
the configured defaults plus command-line overrides, checks the chosen font
against Google Fonts, validates the font weights, and then writes
``index.html``, ``styles.css``, ``script.js`` and ``reset.css`` (and optionally
``boilerplate.zip``) into an output directory. Artifacts can also be printed or
copied to the clipboard.

Examples
--------
Generate the default boilerplate into ``dist/``:

>>> from boilerplate_forge.cli import main
>>> main()  # doctest: +SKIP

Pick a font and colours, and bundle the result:

>>> from boilerplate_forge.cli import app
>>> app(
...     [
...         "generate",
...         "--font-family", "Open Sans",
...         "--font-weights", "400;700",
...         "--color", "primary=210,50%,50%",
...         "--archive",
...     ]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

from cyclopts import App, Parameter
from ruamel.yaml import YAML

from ._constants import ARTIFACT_NAMES
from .config import DEFAULT_CONFIG, FormDefaults, load_form_defaults
from .controller import BoilerplateController
from .fonts import GoogleFontsCatalog
from .form import FormState

DEFAULT_OUTPUT_DIR = Path("dist")

app = App(name="boilerplate", help="Generate HTML/CSS/JS starter files.")

_CONFIG_HELP = f"YAML file with form defaults (default: {DEFAULT_CONFIG}, when present)"

_FIELD_OVERRIDES = (
    "font_family",
    "font_weights",
    "font_size",
    "line_height",
    "language",
    "title",
    "author",
    "description",
    "favicon",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_defaults(config: Path | None) -> FormDefaults:
    if config is None:
        if not DEFAULT_CONFIG.is_file():
            return FormDefaults()
        config = DEFAULT_CONFIG
    return load_form_defaults(config)


def _check_artifact_names(names: typ.Iterable[str], option: str) -> None:
    unknown = [name for name in names if name not in ARTIFACT_NAMES]
    if unknown:
        msg = (
            f"Unknown artifact(s) for {option}: {', '.join(unknown)}. "
            f"Choose from: {', '.join(ARTIFACT_NAMES)}"
        )
        raise ValueError(msg)


def build_form(
    defaults: FormDefaults,
    *,
    overrides: typ.Mapping[str, str | None],
    colors: typ.Sequence[str] = (),
    scripts: typ.Sequence[str] = (),
    sample_content: bool | None = None,
) -> FormState:
    """Return a form showing ``defaults`` with the given overrides typed in.

    Parameters
    ----------
    defaults : FormDefaults
        Initial field values.
    overrides : Mapping[str, str or None]
        Field name to text; ``None`` leaves the field untouched. Blank text
        reverts the field to its default, as leaving a field empty would.
    colors : Sequence[str]
        ``name=value`` colour assignments.
    scripts : Sequence[str]
        Extra script URLs appended after the configured ones.
    sample_content : bool or None
        Override for the sample-content checkbox.
    """
    form = FormState.from_defaults(defaults)
    for field_name, text in overrides.items():
        if field_name not in _FIELD_OVERRIDES:
            msg = f"Unknown form field '{field_name}'."
            raise KeyError(msg)
        if text is not None:
            getattr(form, field_name).set(text)
    form.apply_colors(colors)
    form.extra_scripts.extend(scripts)
    if sample_content is not None:
        form.include_sample_content = sample_content
    return form


@app.command(help="Generate the boilerplate files from form values.")
def generate(
    *,
    config: typ.Annotated[Path | None, Parameter(help=_CONFIG_HELP)] = None,
    output_dir: typ.Annotated[
        Path, Parameter(help="Folder receiving the generated files")
    ] = DEFAULT_OUTPUT_DIR,
    font_family: typ.Annotated[
        str | None, Parameter(help="Google Fonts family name")
    ] = None,
    font_weights: typ.Annotated[
        str | None, Parameter(help="Weights separated by ';', e.g. 400;700")
    ] = None,
    font_size: typ.Annotated[
        str | None, Parameter(help="Root font size, e.g. 100% or 16px")
    ] = None,
    line_height: typ.Annotated[str | None, Parameter(help="Body line height")] = None,
    language: typ.Annotated[str | None, Parameter(help="HTML lang attribute")] = None,
    title: typ.Annotated[str | None, Parameter(help="Page title")] = None,
    author: typ.Annotated[str | None, Parameter(help="Author meta tag")] = None,
    description: typ.Annotated[
        str | None, Parameter(help="Description meta tag")
    ] = None,
    favicon: typ.Annotated[str | None, Parameter(help="Favicon path")] = None,
    color: typ.Annotated[
        list[str] | None, Parameter(help="Colour variable as name=value (repeatable)")
    ] = None,
    script: typ.Annotated[
        list[str] | None, Parameter(help="Extra script URL (repeatable)")
    ] = None,
    sample_content: typ.Annotated[
        bool | None, Parameter(help="Include sample header, paragraph, and footer")
    ] = None,
    check_font: typ.Annotated[
        bool, Parameter(help="Verify the font family on Google Fonts")
    ] = True,
    files: typ.Annotated[
        bool, Parameter(help="Write each artifact into the output folder")
    ] = True,
    archive: typ.Annotated[
        bool, Parameter(help="Also write boilerplate.zip")
    ] = False,
    show: typ.Annotated[
        list[str] | None, Parameter(help="Print an artifact (repeatable)")
    ] = None,
    copy: typ.Annotated[
        list[str] | None, Parameter(help="Copy an artifact to the clipboard")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Generate boilerplate files for the requested form values.

    Returns
    -------
    None
        Writes artifacts and prints a status line per action.

    Raises
    ------
    SystemExit
        With status 1 when a gate failure blocks generation or an export
        action fails.
    ValueError
        If ``--show`` or ``--copy`` names an unknown artifact.
    """
    _configure_logging(verbose)
    show_names = show or []
    copy_names = copy or []
    _check_artifact_names(show_names, "--show")
    _check_artifact_names(copy_names, "--copy")

    form = build_form(
        _load_defaults(config),
        overrides={
            "font_family": font_family,
            "font_weights": font_weights,
            "font_size": font_size,
            "line_height": line_height,
            "language": language,
            "title": title,
            "author": author,
            "description": description,
            "favicon": favicon,
        },
        colors=color or [],
        scripts=script or [],
        sample_content=sample_content,
    )
    controller = BoilerplateController(
        output_dir,
        catalog=GoogleFontsCatalog() if check_font else None,
        notify=print,
    )
    artifacts = controller.submit(form)
    if artifacts is None:
        raise SystemExit(1)

    for name in show_names:
        sys.stdout.write(controller.text_of(name))

    if files:
        for name in artifacts.names:
            controller.download(name)

    failed = False
    for name in copy_names:
        failed |= not controller.copy(name)
    if archive:
        failed |= controller.download_archive() is None
    if failed:
        raise SystemExit(1)


@app.command(help="Print the effective form defaults as YAML.")
def defaults(
    *,
    config: typ.Annotated[Path | None, Parameter(help=_CONFIG_HELP)] = None,
) -> None:
    """Print the defaults every run starts from."""
    values = _load_defaults(config)
    document = {
        "font": {
            "family": values.font_family,
            "weights": values.font_weights,
            "size": values.font_size,
            "line_height": values.line_height,
        },
        "page": {
            "language": values.language,
            "title": values.title,
            "author": values.author,
            "description": values.description,
            "favicon": values.favicon,
        },
        "colors": dict(values.colors),
        "sample_content": values.include_sample_content,
        "scripts": list(values.extra_scripts),
    }
    yaml = YAML()
    yaml.default_flow_style = False
    yaml.dump(document, sys.stdout)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``boilerplate`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
