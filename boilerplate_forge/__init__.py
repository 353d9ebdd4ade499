"""Utilities for generating static-site boilerplate files.

This package exposes the CLI entry points used by the ``boilerplate`` console
script to turn typography, colour, and metadata choices into ``index.html``,
``styles.css``, ``script.js``, ``reset.css``, and an optional
``boilerplate.zip`` bundle.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from boilerplate_forge import main
>>> main()  # doctest: +SKIP
>>> from boilerplate_forge import app
>>> app.name  # doctest: +SKIP
('boilerplate',)
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
