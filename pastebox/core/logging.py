from __future__ import annotations

import logging
from typing import Optional

from .config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None, *, force: bool = False) -> None:
    """Configure root logging once; ``force`` replaces existing handlers.

    The ``pastebox`` logger follows the configured level even when the host
    (streamlit, pytest) has already installed root handlers.
    """

    resolved = (level or settings.log_level).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT, force=force)
    logging.getLogger("pastebox").setLevel(resolved)


configure_logging()
