"""Streamlit interface for stripping emoji from pasted or uploaded text."""

from __future__ import annotations

from pathlib import Path

import streamlit as st

from nomoji.config import DEFAULT_CONFIG
from nomoji.processing.emoji_cleaner import remove_emoji

try:
    from dotenv import load_dotenv
except ImportError:  # pragma: no cover - optional dependency
    load_dotenv = None

if load_dotenv:
    load_dotenv()
    load_dotenv(Path(__file__).resolve().parent / ".env")


st.set_page_config(page_title="nomoji", layout="wide")
st.title("Remove emoji from text")

with st.form("input_form"):
    pasted = st.text_area("Text", height=240, placeholder="Paste text here...")
    uploaded = st.file_uploader("...or upload a text file", type=None)
    submitted = st.form_submit_button("Remove emoji")

if submitted:
    file_name = "cleaned.txt"
    source = pasted
    if uploaded is not None:
        file_name = uploaded.name
        try:
            source = uploaded.getvalue().decode(DEFAULT_CONFIG.io.encoding)
        except UnicodeDecodeError as exc:
            st.error(f"Failed to read file: {exc}")
            st.stop()

    if not source:
        st.error("Please paste some text or upload a file.")
    else:
        result = remove_emoji(source)
        st.success(f"{result.removed} {DEFAULT_CONFIG.report.unit} removed.")

        st.subheader("Cleaned text")
        st.download_button(
            label="Download cleaned text",
            data=result.text.encode(DEFAULT_CONFIG.io.encoding),
            file_name=file_name,
            mime="text/plain",
        )
        st.text(result.text)
