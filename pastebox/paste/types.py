from __future__ import annotations

import enum
from dataclasses import dataclass, field
from email.message import Message
from email.utils import collapse_rfc2231_value
from typing import Dict, Optional


class PasteType(str, enum.Enum):
    file = "file"
    url = "url"


@dataclass(frozen=True)
class Paste:
    data: bytes
    type: PasteType


@dataclass(frozen=True)
class ContentDisposition:
    """Parsed ``Content-Disposition`` of a single multipart field."""

    disposition: str
    parameters: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, header: str) -> "ContentDisposition":
        """Parse a raw header value such as ``form-data; name="file"; filename="a.txt"``."""
        message = Message()
        message["Content-Disposition"] = header
        params = message.get_params(header="Content-Disposition") or []
        if not params:
            return cls(disposition="")
        disposition, _ = params[0]
        # RFC 2231 values (filename*=UTF-8''...) arrive as (charset, language, text).
        parameters = {
            key.lower(): value if isinstance(value, str) else collapse_rfc2231_value(value)
            for key, value in params[1:]
        }
        return cls(disposition=disposition.lower(), parameters=parameters)

    @classmethod
    def form_field(cls, name: str, filename: Optional[str] = None) -> "ContentDisposition":
        parameters = {"name": name}
        if filename is not None:
            parameters["filename"] = filename
        return cls(disposition="form-data", parameters=parameters)

    @property
    def name(self) -> Optional[str]:
        return self.parameters.get("name")

    @property
    def filename(self) -> Optional[str]:
        return self.parameters.get("filename")

    def has_form_field(self, name: str) -> bool:
        return self.disposition == "form-data" and self.name == name
