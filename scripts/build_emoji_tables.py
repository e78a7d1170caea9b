import argparse
import sys
from pathlib import Path

from emoji_spans.tables import EMOJI_BASE_RANGES
from emoji_spans.utils.unicode_data import base_ranges, format_table, parse_emoji_data, range_stats

# -------------------------------
# Regenerate EMOJI_BASE_RANGES from emoji-data.txt
# https://www.unicode.org/Public/UCD/latest/ucd/emoji/emoji-data.txt
# -------------------------------


def main() -> int:
    ap = argparse.ArgumentParser(description="Print an EMOJI_BASE_RANGES table built from emoji-data.txt")
    ap.add_argument("emoji_data", type=str, help="Path to emoji-data.txt")
    ap.add_argument("--output", type=str, default=None, help="Write the table here instead of stdout")
    args = ap.parse_args()

    path = Path(args.emoji_data)
    if not path.is_file():
        print(f"File not found: {path}", file=sys.stderr)
        return 1

    properties = parse_emoji_data(path.read_text(encoding="utf-8"))
    ranges = base_ranges(properties)
    table = format_table("EMOJI_BASE_RANGES", ranges)

    if args.output:
        Path(args.output).write_text(table + "\n", encoding="utf-8")
    else:
        print(table)

    new_count, new_cps = range_stats(ranges)
    old_count, old_cps = range_stats(list(EMOJI_BASE_RANGES))
    print(f"Ranges:      {old_count} -> {new_count}", file=sys.stderr)
    print(f"Code points: {old_cps} -> {new_cps}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
