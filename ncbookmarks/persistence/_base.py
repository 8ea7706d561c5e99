"""Base TOML persistence store."""

from __future__ import annotations

import tomllib
from pathlib import Path

from ..constants import FILE_HEADER
from ..log import logger


class TomlStore:
    """TOML file store with tolerant reads and full-file rewrites.

    Reads never raise: any I/O or syntax problem yields an empty document
    plus a diagnostic.  Writes always replace the whole file and let
    ``OSError`` propagate to the caller.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def load_document(self) -> tuple[dict, str | None]:
        """Read and decode the file.

        Returns ``(document, error)``.  A missing or empty file is a clean
        empty document; a broken one is an empty document with *error* set.
        """
        if not self.path.exists():
            return {}, None
        try:
            text = self.path.read_text(encoding="utf-8")
            return tomllib.loads(text), None
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
            logger.debug("failed to load TOML store from %s", self.path, exc_info=True)
            return {}, f"{type(exc).__name__}: {exc}"

    def write_document(self, body: str) -> None:
        """Overwrite the file with the generated-file header followed by *body*.

        The text is encoded before the file is opened, so an encoding error
        leaves the previous contents untouched.
        """
        data = (FILE_HEADER + body).encode("utf-8")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(data)
