"""Immutable containers for generated boilerplate files."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc

from boilerplate_forge._constants import ARTIFACT_NAMES


@dc.dataclass(frozen=True, slots=True)
class Artifact:
    """One generated text file.

    Attributes
    ----------
    name : str
        Filename the content is offered under, for example ``"styles.css"``.
    content : str
        Full text of the file.
    """

    name: str
    content: str


@dc.dataclass(frozen=True, slots=True)
class ArtifactSet:
    """The four files produced by one generator run, in a fixed order."""

    artifacts: tuple[Artifact, ...]

    def __post_init__(self) -> None:
        names = tuple(artifact.name for artifact in self.artifacts)
        if names != ARTIFACT_NAMES:
            msg = f"Expected artifacts {ARTIFACT_NAMES}, got {names}"
            raise ValueError(msg)

    def __iter__(self) -> cabc.Iterator[Artifact]:
        return iter(self.artifacts)

    def __len__(self) -> int:
        return len(self.artifacts)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(artifact.name for artifact in self.artifacts)

    def get(self, name: str) -> Artifact:
        """Return the artifact called ``name``."""
        for artifact in self.artifacts:
            if artifact.name == name:
                return artifact
        available = ", ".join(self.names)
        msg = f"Unknown artifact '{name}'. Known artifacts: {available}"
        raise KeyError(msg)


__all__ = ["Artifact", "ArtifactSet"]
