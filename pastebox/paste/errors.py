from __future__ import annotations


class PasteError(Exception):
    """Base class for paste failures that are reported back to the client."""

    client_error: bool = True


class ClassificationError(PasteError):
    """Neither the ``file`` nor the ``url`` form field was present."""


class ValidationError(PasteError):
    """A URL paste was not valid UTF-8 text or not an absolute URL."""


class UnauthorizedError(PasteError):
    """The supplied auth token did not match the configured one."""


class PayloadTooLargeError(PasteError):
    """The paste exceeded ``server.max_content_length``."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"Payload of {size} bytes exceeds the {limit} byte limit")
        self.size = size
        self.limit = limit


def is_client_error(exc: BaseException) -> bool:
    """Return ``True`` when ``exc`` is the client's fault.

    Filesystem failures (``OSError``) and anything unexpected count as server
    errors.
    """
    return isinstance(exc, PasteError) and exc.client_error
