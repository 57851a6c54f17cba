r"""Path strings addressing nodes of a JSON document or its inferred schema.

Format:
    $            the root value
    .name        an object field
    []           any element of an array (canonical form)
    [N]          a concrete array element (transient, never stored)

Inside a field name the characters ``.``, ``[``, ``]`` and ``\`` are
backslash-escaped, so the key ``"x[3]"`` becomes ``$.x\[3\]`` and is never
read as an array index.

Every key stored in an analysis result is canonical. Concrete paths such as
``$[3].tags[1]`` must be normalized to ``$[].tags[]`` before lookup.
"""

from __future__ import annotations

import re

ROOT = "$"
ITEM = "[]"

_INDEX_RE = re.compile(r"\[\d+\]")
_SEGMENT_RE = re.compile(r"\.((?:\\.|[^.\[\]\\])+)|\[(\d*)\]")
_SPECIAL_RE = re.compile(r"([.\[\]\\])")
_ESCAPED_RE = re.compile(r"\\(.)")


def escape_name(field_name: str) -> str:
    return _SPECIAL_RE.sub(r"\\\1", field_name)


def unescape_name(segment: str) -> str:
    return _ESCAPED_RE.sub(r"\1", segment)


def normalize_path(path: str) -> str:
    """Replace every concrete ``[N]`` index with the generic ``[]``."""
    return _INDEX_RE.sub(ITEM, path)


def is_canonical(path: str) -> bool:
    """True when the path contains no concrete array index."""
    return _INDEX_RE.search(path) is None


def child_path(base: str, field_name: str) -> str:
    """Path of an object field below ``base``."""
    return f"{base}.{escape_name(field_name)}"


def item_path(base: str) -> str:
    """Canonical path of any element of the array at ``base``."""
    return f"{base}{ITEM}"


def _segments(path: str) -> list[tuple[str, str]]:
    body = path[1:] if path.startswith(ROOT) else path
    return _SEGMENT_RE.findall(body)


def split_path(path: str) -> list[str]:
    """Split a path into its segments, dropping the leading ``$``.

    Field names come back unescaped.

    >>> split_path("$[].tags[2]")
    ['[]', 'tags', '[2]']
    """
    return [unescape_name(name) if name else f"[{index}]" for name, index in _segments(path)]


def leaf_name(path: str) -> str:
    """Name of the last object field on the path, or the path itself at the root.

    Array brackets are skipped, so ``$.user.tags[]`` yields ``tags``.
    """
    for name, _ in reversed(_segments(path)):
        if name:
            return unescape_name(name)
    return path
