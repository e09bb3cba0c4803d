from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pastebox.core.config import AppSettings
from pastebox.paste import (
    ContentDisposition,
    NamingPolicy,
    Paste,
    PasteType,
    PayloadTooLargeError,
    UnauthorizedError,
    classify,
    is_client_error,
    store_file,
    store_url,
)

logger = logging.getLogger(__name__)


@dataclass
class SubmissionResult:
    name: str
    type: PasteType
    size: int


class PasteService:
    """Application layer between a transport and the paste writer."""

    def __init__(self, settings: AppSettings, policy: Optional[NamingPolicy] = None):
        self.settings = settings
        self.policy = policy or NamingPolicy.from_settings(settings)

    @property
    def upload_root(self) -> Path:
        return self.settings.server.upload_path

    def ensure_layout(self) -> None:
        """Create the upload root and its ``url`` subdirectory if missing."""
        self.settings.url_dir.mkdir(parents=True, exist_ok=True)

    def check_auth(self, token: Optional[str]) -> None:
        expected = self.settings.server.auth_token
        if not expected:
            return
        if token is None or not secrets.compare_digest(token.encode(), expected.encode()):
            raise UnauthorizedError("Invalid or missing auth token")

    def check_size(self, data: bytes) -> None:
        limit = int(self.settings.server.max_content_length)
        if len(data) > limit:
            raise PayloadTooLargeError(len(data), limit)

    def submit(
        self,
        disposition: ContentDisposition,
        data: bytes,
        *,
        file_name: Optional[str] = None,
        token: Optional[str] = None,
    ) -> SubmissionResult:
        """Validate a submission and store it, returning the resolved name."""
        try:
            self.check_auth(token)
            self.check_size(data)
            paste = Paste(data=data, type=classify(disposition))
            if paste.type == PasteType.url:
                name = store_url(paste, self.policy, self.upload_root)
            else:
                requested = file_name if file_name is not None else disposition.filename
                name = store_file(paste, requested, self.policy, self.upload_root)
        except Exception as exc:
            if is_client_error(exc):
                logger.info("Rejected paste: %s", exc)
            else:
                logger.exception("Failed to store paste")
            raise
        logger.info("Stored %s paste as %s (%d bytes)", paste.type.value, name, len(paste.data))
        return SubmissionResult(name=name, type=paste.type, size=len(paste.data))
