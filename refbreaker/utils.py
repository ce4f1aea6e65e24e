"""Small file and string helpers."""

from __future__ import annotations

_TRIM_CHARS = " \t\r\n"


def read_file(filename: str) -> str:
    """Return the whole content of ``filename``."""
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise OSError(f"Could not open file: {filename}") from exc


def write_file(filename: str, content: str) -> None:
    """Write ``content`` to ``filename``, replacing what was there."""
    try:
        with open(filename, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except OSError as exc:
        raise OSError(f"Could not open file for writing: {filename}") from exc


def split_string(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, dropping empty pieces."""
    return [token for token in text.split(delimiter) if token]


def trim(text: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return text.strip(_TRIM_CHARS)