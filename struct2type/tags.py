"""
tags.py — Parse Go struct tags.

A struct tag is a sequence of space-separated key:"value" pairs, the same
grammar reflect.StructTag.Lookup accepts:

    json:"name,omitempty" xml:"name"

Parsing stops at the first malformed pair. Pairs before it are still
visible, anything after it is treated as absent. Nothing here raises.
"""

import json
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

SKIP_MARKER = "-"


@dataclass(frozen=True)
class TagDirective:
    """The parsed value of one tag key, e.g. json:"id,omitempty"."""

    alias: str
    options: Tuple[str, ...] = ()
    skip: bool = False


def _unquote(quoted: str) -> Optional[str]:
    """Decode a double-quoted tag value. Returns None if the escapes are invalid."""
    try:
        value = json.loads(quoted)
    except ValueError:
        return None
    return value if isinstance(value, str) else None


def iter_tag_pairs(tag: str) -> Iterator[Tuple[str, str]]:
    """Yield (key, value) pairs from a struct tag, in order."""
    i = 0
    n = len(tag)
    while i < n:
        # Skip leading space
        while i < n and tag[i] == " ":
            i += 1
        if i >= n:
            return

        # Key: printable, not space, not ':' or '"'
        start = i
        while i < n and tag[i] > " " and tag[i] not in ':"' and tag[i] != "\x7f":
            i += 1
        if i == start or i + 1 >= n or tag[i] != ":" or tag[i + 1] != '"':
            return
        key = tag[start:i]

        # Quoted value, honouring backslash escapes
        i += 1
        value_start = i
        i += 1
        while i < n and tag[i] != '"':
            if tag[i] == "\\":
                i += 1
            i += 1
        if i >= n:
            return
        i += 1

        value = _unquote(tag[value_start:i])
        if value is None:
            return
        yield key, value


def lookup_tag(tag: Optional[str], key: str) -> Optional[str]:
    """Return the value for ``key``, or None if absent or unreachable."""
    for k, value in iter_tag_pairs(tag or ""):
        if k == key:
            return value
    return None


def parse_directive(tag: Optional[str], key: str = "json") -> Optional[TagDirective]:
    """
    Parse the serialization directive stored under ``key``.

    Returns None when the tag has no such key. A value of exactly "-"
    marks the field as skipped; otherwise the first comma-separated
    segment is the alias (possibly empty) and the rest are options.
    """
    value = lookup_tag(tag, key)
    if value is None:
        return None
    if value == SKIP_MARKER:
        return TagDirective(alias="", skip=True)
    alias, *options = value.split(",")
    return TagDirective(alias=alias, options=tuple(options))
