"""Page controller tying the form, gates, generator, and exports together.

One :class:`BoilerplateController` is constructed at startup. It owns the
output directory, the font catalog client, the clipboard, the notification
callback, and the artifact set from the most recent successful submission.
Each submission runs the gates (remote font check, then configuration
validation) and, when they pass, replaces the current artifact set wholesale.
Gate failures and per-action export failures are reported to the user and
never disturb the artifacts already on offer.

Example
-------
>>> from pathlib import Path
>>> from boilerplate_forge.config import FormDefaults
>>> from boilerplate_forge.form import FormState
>>> controller = BoilerplateController(Path("dist"), notify=print)  # doctest: +SKIP
>>> controller.submit(FormState.from_defaults(FormDefaults()))  # doctest: +SKIP
>>> controller.download_archive()  # doctest: +SKIP
ZIP file downloaded!
PosixPath('dist/boilerplate.zip')
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from .clipboard import ClipboardError, SystemClipboard
from .config import SiteConfigError
from .export import ArchiveError, ExportPackager
from .fonts import FontCatalogError
from .generator import BoilerplateGenerator

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .clipboard import ClipboardWriter
    from .config import SiteConfig
    from .fonts import GoogleFontsCatalog
    from .form import FormState
    from .generator import ArtifactSet

logger = logging.getLogger(__name__)


class NoArtifactsError(RuntimeError):
    """Raised when an export is requested before anything was generated."""


class BoilerplateController:
    """Drive one boilerplate session from form submission to export."""

    def __init__(
        self,
        output_dir: Path,
        *,
        catalog: GoogleFontsCatalog | None = None,
        clipboard: ClipboardWriter | None = None,
        generator: BoilerplateGenerator | None = None,
        notify: cabc.Callable[[str], None] | None = None,
    ) -> None:
        """Initialise the controller.

        Parameters
        ----------
        output_dir : Path
            Directory receiving downloaded files.
        catalog : GoogleFontsCatalog, optional
            Font catalog used for the remote family check; ``None`` skips the
            check.
        clipboard : ClipboardWriter, optional
            Clipboard used by :meth:`copy`. Defaults to :class:`SystemClipboard`.
        generator : BoilerplateGenerator, optional
            Template generator; defaults to one using the packaged templates.
        notify : callable, optional
            Receives every user-facing message. When omitted messages are
            logged instead.
        """
        self.output_dir = output_dir
        self.catalog = catalog
        self.clipboard = clipboard or SystemClipboard()
        self.generator = generator or BoilerplateGenerator()
        self._notify = notify
        self._packager: ExportPackager | None = None
        self.last_error: Exception | None = None

    @property
    def artifacts(self) -> ArtifactSet | None:
        """Return the artifact set currently on offer, if any."""
        if self._packager is None:
            return None
        return self._packager.artifacts

    def submit(self, form: FormState) -> ArtifactSet | None:
        """Run the gates for ``form`` and generate a fresh artifact set.

        Returns
        -------
        ArtifactSet or None
            The new artifact set, or ``None`` when a gate failed. A failed
            submission leaves the previous artifact set in place.
        """
        self.last_error = None
        family = form.font_family.value.strip()
        try:
            if self.catalog is not None and family:
                self.catalog.ensure_family_exists(family)
            config = form.to_site_config()
        except (FontCatalogError, SiteConfigError) as exc:
            self._report(str(exc), exc)
            return None
        return self.generate(config)

    def generate(self, config: SiteConfig) -> ArtifactSet:
        """Generate artifacts for an already validated ``config``."""
        artifacts = self.generator.generate(config)
        self._packager = ExportPackager(artifacts, self.output_dir)
        logger.debug("Generated %s", ", ".join(artifacts.names))
        return artifacts

    def text_of(self, name: str) -> str:
        """Return the content of artifact ``name`` for display."""
        return self._require_packager().text_of(name)

    def copy(self, name: str) -> bool:
        """Copy artifact ``name`` to the clipboard, reporting the outcome."""
        self.last_error = None
        text = self.text_of(name)
        try:
            self.clipboard.write(text)
        except ClipboardError as exc:
            self._report(str(exc), exc)
            return False
        self._report("Copied to clipboard!")
        return True

    def download(self, name: str) -> Path:
        """Write artifact ``name`` into the output directory."""
        path = self._require_packager().download_single(name)
        self._report(f"{name} downloaded!")
        return path

    def download_archive(self) -> Path | None:
        """Write ``boilerplate.zip``; return ``None`` when the archive failed."""
        packager = self._require_packager()
        self.last_error = None
        try:
            path = packager.download_archive()
        except ArchiveError as exc:
            self._report(str(exc), exc)
            return None
        self._report("ZIP file downloaded!")
        return path

    def _require_packager(self) -> ExportPackager:
        if self._packager is None:
            msg = "Generate the boilerplate before exporting it."
            raise NoArtifactsError(msg)
        return self._packager

    def _report(self, message: str, exc: Exception | None = None) -> None:
        if exc is not None:
            self.last_error = exc
            logger.debug("%s", message, exc_info=exc)
        if self._notify is not None:
            self._notify(message)
        elif exc is not None:
            logger.warning(message)
        else:
            logger.info(message)


__all__ = ["BoilerplateController", "NoArtifactsError"]
