"""Pure helpers for turning client-supplied names into storage paths."""

from __future__ import annotations

from pathlib import PurePath, PurePosixPath
from typing import Optional, Tuple, TypeVar

import filetype

DEFAULT_FILE_NAME = "file"
STDIN_ALIAS = "-"
STDIN_FILE_NAME = "stdin"

P = TypeVar("P", bound=PurePath)


def base_name(requested: Optional[str]) -> str:
    """Return the last component of ``requested`` with reserved names mapped.

    Both ``/`` and ``\\`` count as separators, whatever the host platform.
    """
    name = PurePosixPath((requested or "").replace("\\", "/")).name
    if name in ("", ".", ".."):
        return DEFAULT_FILE_NAME
    if name == STDIN_ALIAS:
        return STDIN_FILE_NAME
    return name


def split_extension(name: str) -> Tuple[str, Optional[str]]:
    """Split ``name`` at its last dot.

    The extension is ``None`` when there is no dot after a non-empty stem
    (``plain``, ``.bashrc``) and ``""`` for a trailing dot (``notes.``).
    """
    if name == "..":
        return name, None
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return name, None
    return stem, ext


def extension(path: PurePath) -> Optional[str]:
    return split_extension(path.name)[1]


def set_extension(path: P, ext: str) -> P:
    """Replace the extension of ``path``; an empty ``ext`` removes it."""
    stem, _ = split_extension(path.name)
    ext = ext.lstrip(".")
    return path.with_name(f"{stem}.{ext}" if ext else stem)


def replace_base(path: P, name: str) -> P:
    """Swap the file name of ``path`` for ``name``, keeping any extension."""
    ext = extension(path)
    renamed = path.with_name(name)
    return set_extension(renamed, ext) if ext is not None else renamed


def infer_extension(data: bytes) -> Optional[str]:
    """Guess an extension from the magic number at the start of ``data``."""
    if not data:
        return None
    return filetype.guess_extension(data)
