#!/usr/bin/env python3
"""
Frontmatter Parser

Extracts the frontmatter block from markdown content and converts it into a
flat record without a general YAML implementation.

Supported grammar (one field per line):
- `key: value` scalars; the key is everything before the first colon
- `key: "value"` double-quoted scalars, quotes removed when they are the only
  pair and wrap the whole value
- `key: [a, "b", 'c']` single-level inline arrays of strings
- `key: true` / `key: false` lowercase boolean literals

Anything else is left as a plain string. Lines without a colon are ignored.
Dates and numbers stay strings; the schema layer coerces them.
"""

import re
from pathlib import Path
from typing import Dict, List, Optional, Union


FrontmatterValue = Union[str, bool, List[str]]

# Block must open on the first line; both delimiters tolerate CRLF
FRONTMATTER_PATTERN = re.compile(r'^---\r?\n(.*?)\r?\n---', re.DOTALL)

BOOLEAN_LITERALS = {'true': True, 'false': False}


def strip_quotes(value: str) -> str:
    """
    Remove one pair of double quotes wrapping the whole value.

    Values with a quote inside the pair (e.g. '"a" b"') are returned as-is.

    Example:
        >>> strip_quotes('"Hello"')
        'Hello'
        >>> strip_quotes('"a" b"')
        '"a" b"'
    """
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"' and '"' not in value[1:-1]:
        return value[1:-1]
    return value


def _strip_item_quotes(item: str) -> str:
    """Drop a single leading and a single trailing quote of either kind."""
    return re.sub(r'^["\']|["\']$', '', item.strip())


def coerce_value(value: str) -> FrontmatterValue:
    """
    Apply quote stripping, inline array and boolean coercion in that order.

    Example:
        >>> coerce_value('[a, "b", c]')
        ['a', 'b', 'c']
        >>> coerce_value('"true"')
        True
        >>> coerce_value('TRUE')
        'TRUE'
    """
    value = strip_quotes(value)

    if value.startswith('[') and value.endswith(']'):
        return [_strip_item_quotes(item) for item in value[1:-1].split(',')]

    return BOOLEAN_LITERALS.get(value, value)


def parse_frontmatter(content: str) -> Optional[Dict[str, FrontmatterValue]]:
    """
    Parse the frontmatter block at the top of markdown content.

    Args:
        content: Full text of a markdown file

    Returns:
        Mapping of field name to coerced value, or None if no block found

    Example:
        >>> parse_frontmatter('---\\ntitle: "Hello"\\ndraft: true\\n---\\nBody')
        {'title': 'Hello', 'draft': True}
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return None

    record: Dict[str, FrontmatterValue] = {}

    for line in match.group(1).split('\n'):
        key, colon, value = line.partition(':')
        if not colon:
            continue

        key = key.strip()
        if key:
            record[key] = coerce_value(value.strip())

    return record


def extract_frontmatter(file_path: Path) -> Optional[Dict[str, FrontmatterValue]]:
    """Read a markdown file as strict UTF-8 and parse its frontmatter block."""
    return parse_frontmatter(Path(file_path).read_text(encoding='utf-8'))
