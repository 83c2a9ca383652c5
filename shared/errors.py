"""Exceptions raised while loading and querying themes."""

from __future__ import annotations
from typing import Optional


class ThemeError(Exception):
    """Base class for every theme load/query failure.

    ``desc`` is a short human readable summary, ``note`` the detail
    (usually the offending key path or parser message) and ``file_name``
    the theme file involved, when known.
    """

    def __init__(self, desc: str, note: str = "", file_name: Optional[str] = None,
                 line: Optional[int] = None):
        self.desc = desc
        self.note = note
        self.file_name = file_name
        self.line = line
        super().__init__(str(self))

    def with_file(self, file_name: str) -> ThemeError:
        """Attach the theme file name if it is not set yet; returns self."""
        if self.file_name is None:
            self.file_name = file_name
            self.args = (str(self),)
        return self

    def __str__(self) -> str:
        text = self.desc
        if self.note:
            text += f" ({self.note})"
        if self.file_name:
            where = self.file_name
            if self.line is not None:
                where += f":{self.line}"
            text += f" [{where}]"
        return text


class ThemeParseError(ThemeError):
    """The theme file is not valid JSON or its root is not an object."""


class MissingKeyError(ThemeError):
    """A required key is absent, or an array index is out of range."""

    def __init__(self, path: str, file_name: Optional[str] = None):
        self.path = path
        super().__init__("Missing key", path, file_name)


class MalformedValueError(ThemeError):
    """A value has the wrong type or arity (position, font-size, color...)."""

    def __init__(self, path: str, expected: str, value=None, file_name: Optional[str] = None):
        self.path = path
        self.expected = expected
        self.value = value
        super().__init__("Malformed value", f"{path}: expected {expected}, got {value!r}", file_name)


class AssetNotFoundError(ThemeError):
    """A referenced image or font file does not exist."""

    def __init__(self, path: str, asset: str, file_name: Optional[str] = None):
        self.path = path
        self.asset = asset
        super().__init__("Asset not found", f"{path} -> {asset}", file_name)
