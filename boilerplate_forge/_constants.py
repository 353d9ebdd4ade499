"""Common literal values used across boilerplate_forge.

These constants keep artifact filenames, the accepted font weights, and the
font service endpoints centralized so the generator, packager, and tests can
import the same values without drifting.

Examples
--------
>>> from boilerplate_forge import _constants
>>> _constants.ARTIFACT_NAMES[0]
'index.html'
>>> "450" in _constants.FONT_WEIGHTS
False
"""

ARTIFACT_NAMES = ("index.html", "styles.css", "script.js", "reset.css")
ARCHIVE_NAME = "boilerplate.zip"
FONT_WEIGHTS = ("100", "200", "300", "400", "500", "600", "700", "800", "900")
GOOGLE_FONTS_API = "https://fonts.googleapis.com"
GOOGLE_FONTS_STATIC = "https://fonts.gstatic.com"
DEFAULT_FAVICON = "favicon.ico"
