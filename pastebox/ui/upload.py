from __future__ import annotations

from typing import Optional

import streamlit as st

from pastebox.core.config import settings
from pastebox.paste import ContentDisposition, is_client_error
from pastebox.services import PasteService, SubmissionResult


def render() -> None:
    """Render the paste interface for file uploads and URLs."""
    st.header("New paste")
    st.write(
        "Upload a file or shorten a URL. The stored name may differ from the one you submit "
        "when random names are enabled or an extension has to be inferred."
    )

    mode = st.radio("Paste type", ["File", "URL"], horizontal=True, key="paste_mode")
    token = st.text_input("Auth token", type="password") if settings.server.auth_token else None

    if mode == "File":
        _render_file_form(token)
    else:
        _render_url_form(token)


def _service() -> PasteService:
    service = PasteService(settings)
    service.ensure_layout()
    return service


def _submit(disposition: ContentDisposition, data: bytes, *, file_name: Optional[str], token: Optional[str]) -> None:
    try:
        result = _service().submit(disposition, data, file_name=file_name, token=token)
    except Exception as exc:
        if is_client_error(exc):
            st.error(str(exc))
        else:
            st.error("Could not store the paste. Check the server logs for details.")
        return
    _render_result(result)


def _render_result(result: SubmissionResult) -> None:
    st.success(f"Stored as `{result.name}`")
    st.caption(f"{result.type.value} paste, {result.size} byte(s)")


def _render_file_form(token: Optional[str]) -> None:
    """Render the file upload form and handle submissions."""
    with st.form("file_paste_form"):
        uploaded = st.file_uploader("Select a file")
        file_name = st.text_input(
            "File name (optional)",
            help="Leave blank to keep the uploaded name. Use '-' for stdin-style pastes.",
        )
        submitted = st.form_submit_button("Upload")

    if not submitted:
        return
    if uploaded is None:
        st.error("Please select a file before submitting.")
        return

    requested = file_name.strip() or uploaded.name
    _submit(
        ContentDisposition.form_field("file", filename=uploaded.name),
        uploaded.getvalue(),
        file_name=requested,
        token=token,
    )


def _render_url_form(token: Optional[str]) -> None:
    with st.form("url_paste_form"):
        url = st.text_input("URL", placeholder="https://example.com/")
        submitted = st.form_submit_button("Shorten")

    if not submitted:
        return
    if not url.strip():
        st.error("Please enter a URL before submitting.")
        return

    _submit(ContentDisposition.form_field("url"), url.strip().encode("utf-8"), file_name=None, token=token)
