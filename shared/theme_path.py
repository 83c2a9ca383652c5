"""Key-path traversal over a raw theme tree and typed value checks.

A key path is a ``/`` separated list of segments, e.g. ``text/lives/position``.
A segment written ``name[N]`` indexes into an array, ``name[]`` uses the index
passed by the caller, so a loop over the tower buttons can read
``tower-buttons[]/tower`` with ``idx=i``.
"""

from __future__ import annotations
import math
import re
from typing import Any, Optional, Union
from shared.constants import PATH_SEPARATOR
from shared.errors import MissingKeyError, MalformedValueError

Number = Union[int, float]
Position = tuple[Number, Number]
ColorValue = Union[str, tuple[int, int, int]]

_SEGMENT_RE = re.compile(r"^(?P<name>[^\[\]]*)(\[(?P<index>-?\d*)\])?$")


def parse_segment(segment: str, idx: int = -1) -> tuple[str, Optional[int]]:
    """Split ``name[N]`` into ``(name, N)``; plain names give ``(name, None)``."""
    m = _SEGMENT_RE.match(segment)
    if not m or not m.group("name"):
        raise MalformedValueError(segment, "key segment", segment)
    if m.group(2) is None:
        return m.group("name"), None
    index = m.group("index")
    return m.group("name"), int(index) if index else idx


def split_path(path: str) -> list[str]:
    parts = path.split(PATH_SEPARATOR)
    if not path or any(p == "" for p in parts):
        raise MalformedValueError(path, "key path", path)
    return parts


def _child(node: Any, name: str, walked: str) -> Any:
    if not isinstance(node, dict):
        raise MalformedValueError(walked or PATH_SEPARATOR, "object", node)
    if name not in node:
        raise MissingKeyError(_join(walked, name))
    return node[name]


def _item(node: Any, index: int, walked: str) -> Any:
    if not isinstance(node, list):
        raise MalformedValueError(walked, "array", node)
    if index < 0 or index >= len(node):
        raise MissingKeyError(f"{walked}[{index}]")
    return node[index]


def _join(walked: str, name: str) -> str:
    return f"{walked}{PATH_SEPARATOR}{name}" if walked else name


def traverse(root: dict, path: str, idx: int = -1) -> Any:
    """Return the value at ``path``; raises MissingKeyError if any step is absent."""
    node: Any = root
    walked = ""
    for segment in split_path(path):
        name, index = parse_segment(segment, idx)
        node = _child(node, name, walked)
        walked = _join(walked, name)
        if index is not None:
            node = _item(node, index, walked)
            walked = f"{walked}[{index}]"
    return node


def key_exists(root: dict, path: str, idx: int = -1) -> bool:
    try:
        traverse(root, path, idx)
    except (MissingKeyError, MalformedValueError):
        return False
    return True


# --- Typed value checks -------------------------------------------------------

def is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid coordinate or size
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def as_position(value: Any, path: str) -> Position:
    if not isinstance(value, (list, tuple)) or len(value) != 2 or not all(is_number(v) for v in value):
        raise MalformedValueError(path, "[x, y] pair of numbers", value)
    return (value[0], value[1])


def as_int(value: Any, path: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise MalformedValueError(path, "integer", value)
    return value


def as_font_size(value: Any, path: str) -> int:
    size = as_int(value, path)
    if size <= 0:
        raise MalformedValueError(path, "positive integer font size", value)
    return size


def as_number(value: Any, path: str) -> Number:
    if not is_number(value):
        raise MalformedValueError(path, "number", value)
    return value


def as_string(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise MalformedValueError(path, "string", value)
    return value


def as_file_name(value: Any, path: str) -> str:
    name = as_string(value, path)
    if not name.strip():
        raise MalformedValueError(path, "non-empty file name", value)
    return name


def as_color(value: Any, path: str) -> ColorValue:
    """A color is a color name or an ``[r, g, b]`` list with 0..255 components."""
    if isinstance(value, str):
        if not value.strip():
            raise MalformedValueError(path, "color name", value)
        return value
    if (isinstance(value, (list, tuple)) and len(value) == 3
            and all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value)):
        return (value[0], value[1], value[2])
    raise MalformedValueError(path, "color name or [r, g, b]", value)


def as_list(value: Any, path: str) -> list:
    if not isinstance(value, list):
        raise MalformedValueError(path, "array", value)
    return value


def as_object(value: Any, path: str) -> dict:
    if not isinstance(value, dict):
        raise MalformedValueError(path, "object", value)
    return value
