"""Bookmark persistence store.

Bookmarks live in memory as an ordered list and on disk as a TOML document
of ``[[bookmark]]`` tables.  The URL is the identity key: inserting a URL
that is already present replaces that entry in place, anything else is
appended.  Every mutation rewrites the whole file.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urlsplit, urlunsplit

import tomli_w

from ..constants import BOOKMARK_TABLE_KEY
from ..log import logger
from ..platform import bookmarks_path
from ._base import TomlStore

# Ports that are implied by the scheme and therefore dropped.
_DEFAULT_PORTS: dict[str, int] = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
    "gopher": 70,
}

# Schemes that always carry a host and a path rooted at "/".
_WEB_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp", "gopher"})


class InvalidURLError(ValueError):
    """A string that cannot be used as a bookmark URL."""


def normalize_url(raw: str) -> str:
    """Return the canonical form of *raw* used for identity comparison.

    Lowercases scheme and host, drops a port equal to the scheme default,
    and gives web URLs with an empty path the root path ``/``.  Userinfo,
    path, query and fragment are kept verbatim.
    """
    text = raw.strip()
    try:
        parts = urlsplit(text)
        port = parts.port
    except ValueError as exc:
        raise InvalidURLError(f"invalid URL {raw!r}: {exc}") from exc

    scheme = parts.scheme.lower()
    if not scheme:
        raise InvalidURLError(f"invalid URL {raw!r}: missing scheme")
    if scheme in _WEB_SCHEMES and not parts.hostname:
        raise InvalidURLError(f"invalid URL {raw!r}: missing host")

    netloc = parts.netloc
    if parts.hostname:
        host = parts.hostname
        if ":" in host:
            host = f"[{host}]"
        netloc = host
        if port is not None and port != _DEFAULT_PORTS.get(scheme):
            netloc = f"{netloc}:{port}"
        userinfo, at, _ = parts.netloc.rpartition("@")
        if at:
            netloc = f"{userinfo}@{netloc}"

    path = parts.path
    if not path and scheme in _WEB_SCHEMES:
        path = "/"
    return urlunsplit((scheme, netloc, path, parts.query, parts.fragment))


def _check_encodable(text: str) -> None:
    # Lone surrogates (undecodable argv bytes) cannot be written as UTF-8.
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError(f"text is not valid UTF-8: {text!r}") from exc


@dataclass(frozen=True)
class Bookmark:
    """A single saved reference.  ``url`` is normalized on construction."""

    title: str
    url: str
    tags: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if isinstance(self.tags, str):
            raise TypeError("tags must be a sequence of strings, not a str")
        object.__setattr__(self, "url", normalize_url(self.url))
        object.__setattr__(self, "tags", tuple(self.tags))
        for text in (self.title, self.url, *self.tags):
            _check_encodable(text)

    def to_record(self) -> dict:
        """Return the TOML table for this bookmark."""
        return {"title": self.title, "url": self.url, "tags": list(self.tags)}

    @classmethod
    def from_record(cls, record: object) -> Bookmark:
        """Build a bookmark from a decoded TOML table.

        Raises ``ValueError`` (or :class:`InvalidURLError`) on a table that
        does not have a string ``title``, a valid ``url`` and a list of
        string ``tags``.
        """
        if not isinstance(record, dict):
            raise ValueError(f"bookmark record is not a table: {record!r}")
        title = record.get("title")
        url = record.get("url")
        tags = record.get("tags")
        if not isinstance(title, str):
            raise ValueError("bookmark record has no string 'title'")
        if not isinstance(url, str):
            raise ValueError("bookmark record has no string 'url'")
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise ValueError("bookmark record has no list of strings 'tags'")
        return cls(title=title, url=url, tags=tags)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of reading a bookmarks file.

    ``error`` is ``None`` when the file was read cleanly (a missing file
    counts as clean) and holds a diagnostic when the contents had to be
    discarded.
    """

    entries: list[Bookmark]
    error: str | None = None

    @property
    def recovered(self) -> bool:
        return self.error is not None


def load_bookmarks(path: Path) -> LoadResult:
    """Decode the bookmarks file at *path*, never raising on bad content."""
    document, error = TomlStore(path).load_document()
    if error is not None:
        return LoadResult([], error)
    records = document.get(BOOKMARK_TABLE_KEY, [])
    if not isinstance(records, list):
        return LoadResult([], f"'{BOOKMARK_TABLE_KEY}' is not an array of tables")
    try:
        entries = [Bookmark.from_record(record) for record in records]
    except ValueError as exc:
        return LoadResult([], str(exc))
    return LoadResult(entries)


class BookmarkStore(TomlStore):
    """Ordered bookmark collection kept in sync with its backing file."""

    def __init__(self, path: Path | None = None) -> None:
        super().__init__(path if path is not None else bookmarks_path())
        logger.info("Reading bookmarks from %s", self.path)
        result = load_bookmarks(self.path)
        if result.recovered:
            logger.warning(
                "Ignoring unreadable bookmarks file %s: %s", self.path, result.error
            )
        self.entries: list[Bookmark] = result.entries
        self.load_error: str | None = result.error
        self.last_write_error: OSError | None = None

    # -- reads ----------------------------------------------------------------

    def get_bookmarks(self) -> list[Bookmark]:
        """Return a snapshot of the entries in their current order."""
        return list(self.entries)

    def get(self, url: str) -> Bookmark | None:
        """Return the entry for *url*, or ``None``."""
        key = normalize_url(url)
        for entry in self.entries:
            if entry.url == key:
                return entry
        return None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Bookmark]:
        return iter(self.get_bookmarks())

    def __contains__(self, url: object) -> bool:
        if not isinstance(url, str):
            return False
        try:
            return self.get(url) is not None
        except InvalidURLError:
            return False

    # -- mutations ------------------------------------------------------------

    def insert(self, entry: Bookmark) -> int | None:
        """Replace the entry with the same URL, or append a new one.

        A replaced entry keeps its position.  Returns that position, or
        ``None`` when *entry* was appended.
        """
        logger.info("Adding bookmark: %r", entry)
        index = next(
            (i for i, e in enumerate(self.entries) if e.url == entry.url), None
        )
        if index is not None:
            self.entries[index] = entry
        else:
            self.entries.append(entry)
        self._persist()
        return index

    def remove(self, url: str) -> None:
        """Drop every entry whose URL equals *url*.  Unknown URLs are a no-op."""
        key = normalize_url(url)
        logger.info("Removing bookmark: %s", key)
        self.entries = [e for e in self.entries if e.url != key]
        self._persist()

    # -- disk -----------------------------------------------------------------

    def write_bookmarks_to_file(self) -> None:
        """Rewrite the backing file from the current entries.

        Missing parent directories are created first, so an absent config
        directory is not an error.  Raises ``OSError`` when the file cannot
        be created or written.
        """
        logger.info("Saving bookmarks to file: %s", self.path)
        self.write_document(encode_bookmarks(self.entries))

    def _persist(self) -> None:
        try:
            self.write_bookmarks_to_file()
        except OSError as exc:
            logger.warning("Could not write bookmarks file: %s", exc)
            self.last_write_error = exc
        else:
            self.last_write_error = None


def encode_bookmarks(entries: Iterable[Bookmark]) -> str:
    """Encode *entries* as consecutive ``[[bookmark]]`` tables."""
    chunks = []
    for entry in entries:
        chunks.append(f"\n[[{BOOKMARK_TABLE_KEY}]]\n")
        chunks.append(tomli_w.dumps(entry.to_record()))
    return "".join(chunks)
