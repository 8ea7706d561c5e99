"""Entry point for the ncbookmarks CLI."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .log import configure_logging, logger
from .persistence import Bookmark, BookmarkStore
from .platform import ConfigDirError
from .preferences import Preferences, load_preferences


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ncbookmarks", description="Manage a file-backed bookmark list"
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"ncbookmarks {__version__}",
    )
    parser.add_argument(
        "--file",
        "-f",
        type=Path,
        help="Bookmarks file to use (default: from preferences or config dir)",
    )
    parser.add_argument(
        "--preferences",
        type=Path,
        help="Preferences file to read",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log store activity to stderr",
    )

    sub = parser.add_subparsers(dest="command")

    list_p = sub.add_parser("list", help="Show all bookmarks")
    list_p.add_argument("--tag", help="Only show bookmarks carrying this tag")

    add_p = sub.add_parser("add", help="Add a bookmark or update an existing URL")
    add_p.add_argument("url")
    add_p.add_argument("--title", default="", help="Bookmark title")
    add_p.add_argument(
        "--tag",
        dest="tags",
        action="append",
        default=[],
        help="Tag to attach (repeatable)",
    )

    rm_p = sub.add_parser("remove", help="Remove the bookmark for a URL")
    rm_p.add_argument("url")
    return parser


def _print_table(console: Console, entries: list[Bookmark]) -> None:
    if not entries:
        console.print("[dim]No bookmarks.[/dim]")
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Title")
    table.add_column("URL", overflow="fold")
    table.add_column("Tags")
    for i, bm in enumerate(entries):
        table.add_row(
            str(i),
            escape(bm.title),
            escape(bm.url),
            escape(", ".join(bm.tags)),
        )
    console.print(table)


def _load_prefs(args: argparse.Namespace) -> Preferences:
    """Load preferences; with an explicit ``--file`` the config dir is optional."""
    try:
        return load_preferences(args.preferences)
    except ConfigDirError:
        if args.file is None:
            raise
        logger.debug("no config directory, using default preferences", exc_info=True)
        return Preferences()


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    console = Console()

    try:
        prefs = _load_prefs(args)
        path = args.file or prefs.resolve_bookmarks_path()
    except ConfigDirError as exc:
        console.print(f"[red]Cannot locate configuration directory:[/red] {exc}")
        return 1
    configure_logging("info" if args.verbose else prefs.logging.level)
    store = BookmarkStore(path)
    if store.load_error:
        console.print(
            f"[yellow]Ignored unreadable bookmarks file {escape(str(path))}[/yellow]"
        )

    command = args.command or "list"
    if command == "list":
        entries = store.get_bookmarks()
        if getattr(args, "tag", None):
            entries = [bm for bm in entries if args.tag in bm.tags]
        _print_table(console, entries)
        return 0

    try:
        if command == "add":
            entry = Bookmark(title=args.title, url=args.url, tags=args.tags)
            index = store.insert(entry)
            verb = "Updated" if index is not None else "Added"
            console.print(f"{verb} {escape(entry.url)}")
        else:
            existed = args.url in store
            store.remove(args.url)
            if existed:
                console.print(f"Removed {escape(args.url)}")
            else:
                console.print(f"[dim]No bookmark for {escape(args.url)}[/dim]")
    except ValueError as exc:
        # InvalidURLError or text that cannot be stored as UTF-8
        console.print(f"[red]{escape(str(exc))}[/red]")
        return 1

    if store.last_write_error is not None:
        console.print(
            f"[red]Could not save bookmarks:[/red] {escape(str(store.last_write_error))}"
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
