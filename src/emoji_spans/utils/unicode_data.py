from typing import Dict, Iterable, List, Tuple

from emoji_spans.classifier import Category, classify
from emoji_spans.tables import Range, coalesce

# Properties of emoji-data.txt that make a code point an emoji base.
BASE_PROPERTIES = ("Extended_Pictographic", "Emoji_Presentation")

_NOT_BASE = frozenset({
    Category.EMOJI_TEXT_DEFAULT,
    Category.MODIFIER,
    Category.VARIATION_SELECTOR,
    Category.ZWJ,
    Category.REGIONAL_INDICATOR,
    Category.TAG,
})


def parse_emoji_data(txt: str) -> Dict[str, List[Range]]:
    """
    Parse the UCD emoji-data.txt format into sorted, coalesced ranges per property.

    Lines look like ``1F600..1F64F  ; Emoji_Presentation  # ...``; comments
    and blank lines are ignored.
    """
    codepoints: Dict[str, List[int]] = {}
    for line_no, raw in enumerate(txt.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        parts = line.split(";")
        if len(parts) != 2:
            raise ValueError(f"Line {line_no}: expected '<range> ; <property>', got {raw!r}")
        code_range, prop_name = parts[0].strip(), parts[1].strip()
        try:
            if ".." in code_range:
                a, b = code_range.split("..", 1)
                first, last = int(a, 16), int(b, 16)
            else:
                first = last = int(code_range, 16)
        except ValueError:
            raise ValueError(f"Line {line_no}: bad code point range {code_range!r}") from None
        if first > last:
            raise ValueError(f"Line {line_no}: reversed range {code_range!r}")
        codepoints.setdefault(prop_name, []).extend(range(first, last + 1))

    return {prop: coalesce(cps) for prop, cps in codepoints.items()}


def base_ranges(properties: Dict[str, List[Range]], names: Iterable[str] = BASE_PROPERTIES) -> List[Range]:
    """Union the given properties and drop everything the fixed categories already claim."""
    codepoints = set()
    for name in names:
        for first, last in properties.get(name, []):
            codepoints.update(range(first, last + 1))
    return coalesce(cp for cp in codepoints if classify(cp) not in _NOT_BASE)


def format_table(name: str, ranges: List[Range]) -> str:
    lines = [f"{name}: Tuple[Range, ...] = ("]
    lines.extend(f"    (0x{first:05X}, 0x{last:05X})," for first, last in ranges)
    lines.append(")")
    return "\n".join(lines)


def range_stats(ranges: List[Range]) -> Tuple[int, int]:
    """Return (number of ranges, number of code points)."""
    return len(ranges), sum(last - first + 1 for first, last in ranges)
