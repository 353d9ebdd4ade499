"""Expose generated artifacts as text, single files, and a zip archive.

:class:`ExportPackager` wraps one :class:`ArtifactSet` and an output
directory. Reading text never changes the artifacts; the two download
operations write files into the output directory. The archive is assembled in
memory first so a failed build never leaves a partial ``boilerplate.zip``
behind.

Example
-------
>>> from pathlib import Path
>>> packager = ExportPackager(artifacts, Path("dist"))  # doctest: +SKIP
>>> packager.download_archive()  # doctest: +SKIP
PosixPath('dist/boilerplate.zip')
"""

from __future__ import annotations

import io
import logging
import typing as typ
import zipfile

from ._constants import ARCHIVE_NAME

try:
    import zlib
except ImportError:  # pragma: no cover - interpreter built without zlib
    zlib = None

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .generator import ArtifactSet

logger = logging.getLogger(__name__)

# Fixed entry timestamp (the zip epoch) so identical artifacts zip identically.
_ARCHIVE_DATE_TIME = (1980, 1, 1, 0, 0, 0)
_ENTRY_MODE = 0o644


class ArchiveError(RuntimeError):
    """Base class for archive download failures."""


class ArchiveUnavailableError(ArchiveError):
    """Raised when the compression capability needed for archives is missing."""


class ArchiveBuildError(ArchiveError):
    """Raised when building the archive fails unexpectedly."""


def compression_available() -> bool:
    """Return ``True`` when deflate compression can be used."""
    return zlib is not None


class ExportPackager:
    """Offer the artifacts of one run for display, copy, and download."""

    def __init__(self, artifacts: ArtifactSet, output_dir: Path) -> None:
        self.artifacts = artifacts
        self.output_dir = output_dir

    def text_of(self, name: str) -> str:
        """Return the verbatim content of the artifact called ``name``."""
        return self.artifacts.get(name).content

    def download_single(self, name: str) -> Path:
        """Write the artifact ``name`` into the output directory.

        Returns
        -------
        Path
            Path of the written file, named exactly like the artifact.
        """
        content = self.text_of(name)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / name
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", path)
        return path

    def build_archive(self) -> bytes:
        """Return a deflated zip holding every artifact under its own name.

        Raises
        ------
        ArchiveUnavailableError
            If deflate compression is not available.
        ArchiveBuildError
            If the zip cannot be assembled.
        """
        if not compression_available():
            msg = "Archive compression is not available. Install zlib support."
            raise ArchiveUnavailableError(msg)

        buffer = io.BytesIO()
        try:
            with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
                for artifact in self.artifacts:
                    info = zipfile.ZipInfo(artifact.name, date_time=_ARCHIVE_DATE_TIME)
                    info.compress_type = zipfile.ZIP_DEFLATED
                    info.external_attr = _ENTRY_MODE << 16
                    archive.writestr(info, artifact.content.encode("utf-8"))
        except (OSError, RuntimeError, ValueError, zipfile.BadZipFile) as exc:
            msg = "Something went wrong while generating the ZIP file."
            raise ArchiveBuildError(msg) from exc
        return buffer.getvalue()

    def download_archive(self) -> Path:
        """Write ``boilerplate.zip`` into the output directory.

        Returns
        -------
        Path
            Path of the written archive.

        Raises
        ------
        ArchiveUnavailableError
            If deflate compression is not available; no file is written.
        ArchiveBuildError
            If the zip cannot be assembled; no file is written.
        """
        payload = self.build_archive()
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / ARCHIVE_NAME
        path.write_bytes(payload)
        logger.debug("Wrote %s (%d bytes)", path, len(payload))
        return path


__all__ = [
    "ArchiveBuildError",
    "ArchiveError",
    "ArchiveUnavailableError",
    "ExportPackager",
    "compression_available",
]
