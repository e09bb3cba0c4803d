from .classifier import classify
from .errors import (
    ClassificationError,
    PasteError,
    PayloadTooLargeError,
    UnauthorizedError,
    ValidationError,
    is_client_error,
)
from .naming import NameGenerator, NamingPolicy, RandomURLConfig, RandomURLType
from .types import ContentDisposition, Paste, PasteType
from .writer import store_file, store_url

__all__ = [
    "classify",
    "ClassificationError",
    "PasteError",
    "PayloadTooLargeError",
    "UnauthorizedError",
    "ValidationError",
    "is_client_error",
    "NameGenerator",
    "NamingPolicy",
    "RandomURLConfig",
    "RandomURLType",
    "ContentDisposition",
    "Paste",
    "PasteType",
    "store_file",
    "store_url",
]
