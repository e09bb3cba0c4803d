from __future__ import annotations

from .errors import ClassificationError
from .types import ContentDisposition, PasteType


def classify(disposition: ContentDisposition) -> PasteType:
    """Map the submitted form field to a paste type.

    ``file`` is checked before ``url``, so a disposition matching both is a
    file paste.
    """
    if disposition.has_form_field("file"):
        return PasteType.file
    if disposition.has_form_field("url"):
        return PasteType.url
    raise ClassificationError(
        f"Expected a 'file' or 'url' form field, got {disposition.name!r}"
    )
