"""Copy text to the system clipboard through platform commands."""

from __future__ import annotations

import logging
import shutil
import subprocess
import typing as typ

logger = logging.getLogger(__name__)

CLIPBOARD_TIMEOUT = 5.0

CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class ClipboardError(RuntimeError):
    """Raised when text cannot be written to the clipboard."""


class ClipboardWriter(typ.Protocol):
    """Anything that can receive copied text."""

    def write(self, text: str) -> None: ...


class SystemClipboard:
    """Pipe text into the first clipboard command found on ``PATH``."""

    def __init__(
        self,
        commands: typ.Sequence[typ.Sequence[str]] = CLIPBOARD_COMMANDS,
        *,
        timeout: float = CLIPBOARD_TIMEOUT,
    ) -> None:
        self.commands = tuple(tuple(command) for command in commands)
        self.timeout = timeout

    def resolve_command(self) -> list[str]:
        """Return the first available command with its executable resolved."""
        for command in self.commands:
            executable = shutil.which(command[0])
            if executable:
                return [executable, *command[1:]]
        names = ", ".join(command[0] for command in self.commands)
        msg = f"No clipboard command available (tried {names})."
        raise ClipboardError(msg)

    def write(self, text: str) -> None:
        """Copy ``text`` to the clipboard.

        Raises
        ------
        ClipboardError
            If no clipboard command exists, the command fails, or it does
            not finish within ``timeout`` seconds.

        Notes
        -----
        Output is sent to ``os.devnull``. ``xclip`` and ``wl-copy`` leave a
        child serving the selection, which would hold captured pipes open
        until another program takes the clipboard.
        """
        command = self.resolve_command()
        logger.debug("Copying %d characters with %s", len(text), command[0])
        try:
            subprocess.run(  # noqa: S603 - command comes from CLIPBOARD_COMMANDS
                command,
                input=text,
                text=True,
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
            )
        except (
            OSError,
            subprocess.CalledProcessError,
            subprocess.TimeoutExpired,
        ) as exc:
            msg = f"Copy failed ({exc}). Please copy manually."
            raise ClipboardError(msg) from exc


__all__ = [
    "CLIPBOARD_COMMANDS",
    "CLIPBOARD_TIMEOUT",
    "ClipboardError",
    "ClipboardWriter",
    "SystemClipboard",
]
