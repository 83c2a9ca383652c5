"""Theme file (de)serialization."""

from __future__ import annotations
import json
from typing import Optional
from shared.errors import ThemeParseError, ThemeError
from shared.models import Theme


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Non-standard number literal {name}")


def parse_theme(text: str, file_name: Optional[str] = None) -> dict:
    """Parse theme JSON text into the raw key tree."""
    try:
        root = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ThemeParseError("Invalid json file", e.msg, file_name, line=e.lineno) from e
    except ValueError as e:
        raise ThemeParseError("Invalid json file", str(e), file_name) from e
    if not isinstance(root, dict):
        raise ThemeParseError("Root value is not an object", type(root).__name__, file_name)
    return root


def load_theme_text(text: str, file_name: Optional[str] = None) -> tuple[dict, Theme]:
    """Parse and validate; returns the raw tree and the typed theme."""
    root = parse_theme(text, file_name)
    try:
        theme = Theme.from_dict(root)
    except ThemeError as e:
        if file_name:
            e.with_file(file_name)
        raise
    return root, theme


def dump_theme(theme: Theme) -> str:
    """Serialize a theme back to JSON text."""
    return json.dumps(theme.to_dict(), indent=4, allow_nan=False) + "\n"
