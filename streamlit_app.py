from __future__ import annotations

import streamlit as st

from pastebox.core.config import settings
from pastebox.core import logging as _logging  # noqa: F401 ensures logging configured
from pastebox.ui import upload


def main() -> None:
    st.set_page_config(page_title=settings.app_name, layout="centered")

    st.sidebar.title(settings.app_name)
    st.sidebar.caption(f"Uploads are stored in {settings.server.upload_path}")

    upload.render()


if __name__ == "__main__":
    main()
