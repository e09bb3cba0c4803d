from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

from pydantic import AnyUrl, TypeAdapter, UrlConstraints
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError
from .naming import NamingPolicy
from .paths import base_name, extension, infer_extension, replace_base, set_extension
from .types import Paste

logger = logging.getLogger(__name__)

URL_DIR_NAME = "url"
DEFAULT_URL_NAME = "url"

AbsoluteUrl = Annotated[AnyUrl, UrlConstraints(host_required=True)]
_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AbsoluteUrl)


def _generated_name(policy: NamingPolicy) -> Optional[str]:
    # An empty replacement would leave the path without a file name.
    name = policy.generate()
    return name or None


def resolve_file_path(paste: Paste, requested_name: Optional[str], policy: NamingPolicy, upload_root: Path) -> Path:
    """Compute where ``store_file`` writes ``paste`` without touching the disk."""
    path = upload_root / base_name(requested_name)
    if extension(path) is not None:
        replacement = _generated_name(policy)
        if replacement is not None:
            path = replace_base(path, replacement)
        return path

    replacement = _generated_name(policy)
    if replacement is not None:
        path = path.with_name(replacement)
    return set_extension(path, infer_extension(paste.data) or policy.default_extension)


def store_file(paste: Paste, requested_name: Optional[str], policy: NamingPolicy, upload_root: Path) -> str:
    """Write a file paste under ``upload_root`` and return the name used.

    - A missing or empty ``requested_name`` becomes ``file``; ``-`` becomes ``stdin``.
    - An explicit extension is always kept, even when the name is replaced.
    - Without one, the extension is sniffed from the content, falling back to
      ``policy.default_extension``.

    ``OSError`` from creating or writing the file propagates unchanged.
    """
    path = resolve_file_path(paste, requested_name, policy, upload_root)
    with path.open("wb") as handle:
        handle.write(paste.data)
    logger.debug("Stored %d byte(s) at %s", len(paste.data), path)
    return path.name


def parse_url(data: bytes) -> str:
    """Return the canonical form of the absolute URL held in ``data``."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValidationError(f"URL paste is not valid UTF-8: {exc}") from exc
    try:
        url = _url_adapter.validate_python(text)
    except PydanticValidationError as exc:
        message = exc.errors()[0]["msg"] if exc.errors() else str(exc)
        raise ValidationError(f"Invalid URL {text!r}: {message}") from exc
    return str(url)


def store_url(paste: Paste, policy: NamingPolicy, upload_root: Path) -> str:
    """Write the canonical URL of ``paste`` to ``upload_root/url/<name>``.

    The ``url`` directory must already exist.
    """
    url = parse_url(paste.data)
    name = _generated_name(policy) or DEFAULT_URL_NAME
    path = upload_root / URL_DIR_NAME / name
    path.write_text(url, encoding="utf-8")
    logger.debug("Stored URL %s at %s", url, path)
    return name
