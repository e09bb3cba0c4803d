from .paste_service import PasteService, SubmissionResult

__all__ = [
    "PasteService",
    "SubmissionResult",
]
