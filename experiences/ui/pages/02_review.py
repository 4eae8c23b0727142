"""
Review page - the screen that receives the hand-off record.
"""

# Ensure project root is on sys.path (Streamlit page files need this).
import sys as _sys; from pathlib import Path as _Path; _r = str(_Path(__file__).resolve().parents[3]); _r in _sys.path or _sys.path.insert(0, _r)  # noqa: E702,I001

import streamlit as st  # noqa: E402

from experiences.ui.components.handoff_card import render_handoff  # noqa: E402

st.header("Review")

handoff = st.session_state.get("handoff")
if handoff is None:
    st.info("Nothing to review yet. Compose an experience first.")
else:
    render_handoff(handoff)
