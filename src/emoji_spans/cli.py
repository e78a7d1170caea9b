"""
Command line front end for emoji span detection.

Usage:
  emoji-spans ranges "Hi 😀!"
  echo "👍🏽" | emoji-spans check
  emoji-spans strip-files docs --ext .md --dry-run
"""
from __future__ import annotations
import argparse
import json
import os
import sys
from pathlib import Path
from typing import List, Optional

from emoji_spans.config import load_settings
from emoji_spans.utils.emoji import EmojiManager
from emoji_spans.utils.logging import configure_logging, get_logger, log_exception, log_time

logger = get_logger(__name__)

DEFAULT_SKIP_DIRS = {
    ".git", ".hg", ".svn",
    "node_modules", "dist", "build", "out",
    ".venv", "venv", "__pycache__",
}


def _read_text(value: Optional[str], strip_line_end: bool = False) -> str:
    if value is not None:
        return value
    text = sys.stdin.read()
    if strip_line_end:
        # drop the newline a pipe like `echo` appends
        if text.endswith("\r\n"):
            return text[:-2]
        if text.endswith("\n"):
            return text[:-1]
    return text


def cmd_ranges(manager: EmojiManager, args: argparse.Namespace) -> int:
    text = _read_text(args.text, strip_line_end=True)
    ranges = manager.emoji_ranges(text)
    if args.json:
        print(json.dumps([[r.start, r.end] for r in ranges]))
        return 0
    for r in ranges:
        print(f"{r.start} {r.end} {text[r.start:r.end]}")
    return 0


def cmd_check(manager: EmojiManager, args: argparse.Namespace) -> int:
    only = manager.is_all_emoji(_read_text(args.text, strip_line_end=True))
    print("true" if only else "false")
    return 0 if only else 1


def cmd_strip(manager: EmojiManager, args: argparse.Namespace) -> int:
    print(manager.remove_emoji(_read_text(args.text)), end="" if args.text is None else "\n")
    return 0


def strip_file(manager: EmojiManager, path: Path, dry_run: bool) -> bool:
    """Strip emoji from one file in place. Returns True if the file changed (or would)."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            original = f.read()
    except UnicodeDecodeError:
        logger.warning(f"Skipping non UTF-8 file: {path}")
        return False

    cleaned = manager.remove_emoji(original)
    if cleaned == original:
        return False

    if not dry_run:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(cleaned)
    return True


@log_exception
@log_time
def cmd_strip_files(manager: EmojiManager, args: argparse.Namespace) -> int:
    root = Path(args.root).resolve()
    if not root.is_dir():
        logger.error(f"Not a directory: {root}")
        return 2

    skip_dirs = DEFAULT_SKIP_DIRS.union(args.skip_dir)
    exts = {e.lower() if e.startswith(".") else f".{e.lower()}" for e in args.ext}

    changed = 0
    scanned = 0
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in skip_dirs)

        for fn in sorted(filenames):
            if Path(fn).suffix.lower() not in exts:
                continue
            scanned += 1
            p = Path(dirpath) / fn
            if strip_file(manager, p, args.dry_run):
                changed += 1
                print(("DRY " if args.dry_run else "") + f"CHANGED: {p}")

    print(f"\nScanned files: {scanned}")
    print(f"Changed files: {changed}" + (" (dry-run)" if args.dry_run else ""))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="emoji-spans", description="Find, test and strip emoji in text")
    ap.add_argument("--config", type=str, default=None, help="Path to config.toml")
    ap.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        default=None,
        help="Override the configured log level",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("ranges", help="Print the emoji ranges of TEXT (end-exclusive)")
    p.add_argument("text", nargs="?", default=None, help="Text to scan; stdin when omitted")
    p.add_argument("--json", action="store_true", help="Print a JSON array of [start, end] pairs")
    p.set_defaults(handler=cmd_ranges)

    p = sub.add_parser("check", help="Exit 0 if TEXT is emoji only, 1 otherwise")
    p.add_argument("text", nargs="?", default=None, help="Text to check; stdin when omitted")
    p.set_defaults(handler=cmd_check)

    p = sub.add_parser("strip", help="Print TEXT without its emoji")
    p.add_argument("text", nargs="?", default=None, help="Text to strip; stdin when omitted")
    p.set_defaults(handler=cmd_strip)

    p = sub.add_parser("strip-files", help="Strip emoji in place from files under ROOT")
    p.add_argument("root", type=str, help="Root folder to process")
    p.add_argument("--ext", action="append", default=None, help="File extension(s) to process (default: .md)")
    p.add_argument("--dry-run", action="store_true", help="Show what would change without writing")
    p.add_argument("--skip-dir", action="append", default=[], help="Additional directory name(s) to skip")
    p.set_defaults(handler=cmd_strip_files)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if getattr(args, "ext", None) is None and args.command == "strip-files":
        args.ext = [".md"]

    settings = load_settings(args.config)
    if args.log_level:
        settings.logging.level = args.log_level
    configure_logging(settings.logging)

    manager = EmojiManager(settings)
    return args.handler(manager, args)


if __name__ == "__main__":
    raise SystemExit(main())
