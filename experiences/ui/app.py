"""
Experiences Streamlit UI - main entry point.

Run with: ``streamlit run experiences/ui/app.py``
"""

# ---------------------------------------------------------------------------
# Ensure project root is on sys.path so ``from experiences.xxx`` imports work.
# Streamlit replaces sys.path[0] with the script directory (experiences/ui/),
# which removes the project root needed for absolute imports.
# ---------------------------------------------------------------------------
import sys  # noqa: E402
from pathlib import Path  # noqa: E402

_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import logging  # noqa: E402

import streamlit as st  # noqa: E402

from experiences.core.config import get_settings  # noqa: E402

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Experiences",
    page_icon="\U0001f4f7",
    layout="centered",
)

_settings = get_settings()
logging.basicConfig(
    level=_settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ---------------------------------------------------------------------------
# Session state defaults
# ---------------------------------------------------------------------------
_DEFAULTS = {
    "composer": None,
    "caption": "",
    "handoff": None,
    "last_upload_id": None,
    "last_clip_id": None,
}

for key, value in _DEFAULTS.items():
    if key not in st.session_state:
        st.session_state[key] = value

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
with st.sidebar:
    st.title("\U0001f4f7 Experiences")
    st.caption("A photo, a sound, and a few words")
    st.divider()
    st.markdown(f"**Recordings folder**: `{_settings.recordings_dir}`")
    st.markdown(
        f"**Display bounds**: {_settings.display_width:g}x{_settings.display_height:g} "
        f"@ {_settings.display_scale:g}x"
    )

# ---------------------------------------------------------------------------
# Navigation (multipage)
# ---------------------------------------------------------------------------
compose_page = st.Page(
    "pages/01_compose.py",
    title="Compose",
    icon="\U0001f5bc️",
    default=True,
)
review_page = st.Page(
    "pages/02_review.py",
    title="Review",
    icon="✅",
)

nav = st.navigation([compose_page, review_page])
nav.run()
