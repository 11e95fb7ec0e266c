"""
Minimal reader for the YAML subset used by content/*/ files.

Supported constructs:
    key: value           → "value" (outer quotes stripped)
    key:                 → ["a", "b"] when followed by "- a", "- b" lines
    key:                 → "" when no dash lines follow
    # comment            → ignored, as are blank lines

Anything else is skipped without an error. Pass a ParseDiagnostics to
find out how many lines were skipped.
"""

import re
from dataclasses import dataclass, field
from enum import Enum

KEY_LINE = re.compile(r"^([A-Za-z0-9_-]+):\s*(.*)$")
ITEM_LINE = re.compile(r"^\s*-\s*(.*)$")
LINE_BREAK = re.compile(r"\r?\n")


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    KEY = "key"
    ITEM = "item"
    OTHER = "other"


@dataclass
class ParseDiagnostics:
    """Collects the 1-based numbers of lines the parser ignored."""

    skipped: list[int] = field(default_factory=list)

    @property
    def skipped_lines(self) -> int:
        return len(self.skipped)


def parse_yaml_scalar(raw) -> str:
    """Strip whitespace and one pair of matching outer quotes."""
    value = (raw or "").strip()
    if not value:
        return ""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def classify_line(line: str, in_list: bool = False) -> LineKind:
    """
    Classify one raw line.

    Inside a list the dash test wins, so "-a: b" is an item there but a
    key named "-a" at the top level. Comments only exist at the top level;
    inside a list a comment is just a line that ends it.
    """
    trimmed = line.strip()
    if not trimmed:
        return LineKind.BLANK
    if in_list:
        return LineKind.ITEM if ITEM_LINE.match(line) else LineKind.OTHER
    if trimmed.startswith("#"):
        return LineKind.COMMENT
    if KEY_LINE.match(trimmed):
        return LineKind.KEY
    if ITEM_LINE.match(line):
        return LineKind.ITEM
    return LineKind.OTHER


def _starts_list(lines: list[str], start: int) -> bool:
    """True when the first non-blank line at or after start is a dash item."""
    j = start
    while j < len(lines) and not lines[j].strip():
        j += 1
    return j < len(lines) and ITEM_LINE.match(lines[j]) is not None


def parse_simple_yaml(text, diagnostics: ParseDiagnostics | None = None) -> dict:
    """Parse text into a dict of strings and lists of strings."""
    out: dict[str, str | list[str]] = {}
    lines = LINE_BREAK.split(str(text or ""))
    i = 0

    while i < len(lines):
        kind = classify_line(lines[i])

        if kind in (LineKind.BLANK, LineKind.COMMENT):
            i += 1
            continue

        if kind is not LineKind.KEY:
            if diagnostics is not None:
                diagnostics.skipped.append(i + 1)
            i += 1
            continue

        key, inline = KEY_LINE.match(lines[i].strip()).groups()

        if inline:
            out[key] = parse_yaml_scalar(inline)
            i += 1
            continue

        if not _starts_list(lines, i + 1):
            # Bare key; nested mappings are not supported.
            out[key] = ""
            i += 1
            continue

        items = []
        i += 1
        while i < len(lines):
            list_kind = classify_line(lines[i], in_list=True)
            if list_kind is LineKind.BLANK:
                i += 1
                continue
            if list_kind is not LineKind.ITEM:
                break
            items.append(parse_yaml_scalar(ITEM_LINE.match(lines[i]).group(1)))
            i += 1
        out[key] = items

    return out
