"""Streamlit playground for the generate endpoint.

Sends prompts through the same handler the serverless function uses and shows
exactly what the frontend would receive: status code, headers and JSON body.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.config import API_KEY_ENV_VARS, DEFAULT_MODEL, Settings, resolve_api_key
from core.handler import GenerateHandler

load_dotenv()
logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="Gemini Prompt Relay", layout="centered")

if "history" not in st.session_state:
    st.session_state["history"] = []

# ============================================================================
# Sidebar: Configuration
# ============================================================================

with st.sidebar:
    st.markdown("### Configuration")
    sidebar_key = st.text_input(
        "Google API Key",
        value="",
        type="password",
        help="Optional: leave blank to use GOOGLE_API_KEY or GEMINI_API_KEY from your environment/.env.",
    )
    api_key = resolve_api_key(sidebar_key, *API_KEY_ENV_VARS)
    if sidebar_key:
        st.caption("Using key from sidebar input.")
    elif api_key:
        st.caption("Using key from environment (.env).")
    else:
        st.caption("No key configured; requests will return a configuration error.")

    model = st.text_input("Model", value=DEFAULT_MODEL)
    show_raw = st.toggle("Show raw response", value=False)

handler = GenerateHandler(settings_loader=lambda: Settings(api_key=api_key, model=model or DEFAULT_MODEL))

# ============================================================================
# Main: Prompt
# ============================================================================

st.header("Gemini Prompt Relay")

prompt = st.text_area("Prompt", height=160, placeholder="Escribe tu consulta...")

if st.button("Send", type="primary", use_container_width=True):
    with st.spinner("Waiting for Gemini..."):
        response = handler({"method": "POST", "body": {"prompt": prompt}})

    st.session_state["history"].insert(0, {"prompt": prompt, "status": response.status})

    body = response.body or {}
    if response.status == 200:
        st.success(f"HTTP {response.status}")
        st.markdown(body["candidates"][0]["content"]["parts"][0]["text"])
    else:
        st.error(f"HTTP {response.status}: {body.get('error', '')}")

    if show_raw:
        st.code(json.dumps(response.to_dict(), indent=2, ensure_ascii=False), language="json")

if st.session_state["history"]:
    st.divider()
    st.subheader("History")
    for entry in st.session_state["history"][:10]:
        st.caption(f"[{entry['status']}] {entry['prompt'][:120]}")
