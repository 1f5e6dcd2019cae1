"""Input text loading shared by CLI commands."""

from __future__ import annotations

from pathlib import Path

from core.errors import LangProfileStoreError


def read_input_text(file_path: str) -> str:
    """Read a UTF-8 text file.

    Raises:
        LangProfileStoreError: If the file cannot be read.
    """
    path = Path(file_path).expanduser()
    try:
        return path.read_text(encoding="utf-8")
    except OSError as error:
        raise LangProfileStoreError(f"Failed to read input text at {path}: {error}.") from error
