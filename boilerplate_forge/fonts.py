"""Font-family existence checks against the Google Fonts CSS API.

Before a boilerplate is generated the chosen family can be verified against the
public font catalog. The check is a single GET to the ``css2`` endpoint; the
service answers with a stylesheet for known families and an error status
otherwise. Failures are surfaced as :class:`UnknownFontFamilyError` or
:class:`FontCatalogUnreachableError` so callers can tell the user which
condition blocked generation.

Example
-------
>>> from boilerplate_forge.fonts import GoogleFontsCatalog
>>> catalog = GoogleFontsCatalog(timeout=5)  # doctest: +SKIP
>>> catalog.ensure_family_exists("Open Sans")  # doctest: +SKIP
"""

from __future__ import annotations

import logging

import requests

from ._constants import GOOGLE_FONTS_API

logger = logging.getLogger(__name__)


class FontCatalogError(RuntimeError):
    """Base class for font catalog gate failures."""


class UnknownFontFamilyError(FontCatalogError):
    """Raised when the font service does not know the requested family."""

    def __init__(self, family: str, status_code: int | None = None) -> None:
        self.family = family
        self.status_code = status_code
        super().__init__(f'Google Font "{family}" does not exist.')


class FontCatalogUnreachableError(FontCatalogError):
    """Raised when the font service cannot be reached."""


def family_query(family: str) -> str:
    """Return ``family`` in the form used by the CSS API (spaces become ``+``).

    Examples
    --------
    >>> family_query("Open Sans")
    'Open+Sans'
    """
    return family.replace(" ", "+")


class GoogleFontsCatalog:
    """Thin wrapper around the Google Fonts ``css2`` endpoint."""

    def __init__(
        self,
        *,
        api_base: str = GOOGLE_FONTS_API,
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ) -> None:
        """Initialise the catalog client.

        Parameters
        ----------
        api_base : str, optional
            Base URL of the font service. Defaults to ``GOOGLE_FONTS_API``.
        session : requests.Session, optional
            Preconfigured session to reuse connections. Defaults to a new
            session per client.
        timeout : float, optional
            Per-request timeout in seconds. Defaults to ``10.0``.

        Notes
        -----
        The client never retries; a failed request is reported immediately.
        """
        self._api_base = api_base.rstrip("/") or GOOGLE_FONTS_API
        self._session = session or requests.Session()
        self.timeout = timeout

    def stylesheet_url(self, family: str) -> str:
        """Return the ``css2`` URL probed for ``family``."""
        return f"{self._api_base}/css2?family={family_query(family)}"

    def ensure_family_exists(self, family: str) -> None:
        """Verify that ``family`` is served by the font catalog.

        Raises
        ------
        UnknownFontFamilyError
            If the service answers with a non-success status.
        FontCatalogUnreachableError
            If the request fails before a response arrives.
        """
        url = self.stylesheet_url(family)
        logger.debug("Checking font family at %s", url)
        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            msg = "Cannot reach Google Fonts. Check your internet connection."
            raise FontCatalogUnreachableError(msg) from exc

        if not response.ok:
            raise UnknownFontFamilyError(family, response.status_code)
        logger.debug("Font family %r found", family)


__all__ = [
    "FontCatalogError",
    "FontCatalogUnreachableError",
    "GoogleFontsCatalog",
    "UnknownFontFamilyError",
    "family_query",
]
