"""
Compose page - pick a photo, record a clip, add a title, continue.
"""

# Ensure project root is on sys.path (Streamlit page files need this).
import sys as _sys; from pathlib import Path as _Path; _r = str(_Path(__file__).resolve().parents[3]); _r in _sys.path or _sys.path.insert(0, _r)  # noqa: E702,I001

import streamlit as st  # noqa: E402

from experiences.ui.components.composer_view import render_composer  # noqa: E402

st.header("New Experience")
render_composer()
