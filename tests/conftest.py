"""Shared fixtures for the boilerplate_forge test suite."""

from __future__ import annotations

import typing as typ

import pytest

from boilerplate_forge.config import SiteConfig
from boilerplate_forge.generator import BoilerplateGenerator

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@pytest.fixture
def make_config() -> cabc.Callable[..., SiteConfig]:
    """Return a factory building SiteConfig objects with sensible defaults."""

    def _make(**overrides: typ.Any) -> SiteConfig:
        values: dict[str, typ.Any] = {
            "font_family": "Roboto",
            "font_weights": ("400", "700"),
            "font_size_base": "100%",
            "language_tag": "en",
            "page_title": "Fixture Site",
            "color_variables": {"--primary": "210,50%,50%", "--text": "#222"},
        }
        values.update(overrides)
        return SiteConfig(**values)

    return _make


@pytest.fixture(scope="session")
def generator() -> BoilerplateGenerator:
    """Share one generator; it holds no per-run state."""
    return BoilerplateGenerator()
