"""Hand-off card component - renders the record received from the compose screen."""

import logging

import streamlit as st

from experiences.core.models import ExperienceHandOff
from experiences.services.audio import AudioProcessor

logger = logging.getLogger(__name__)


def render_handoff(handoff: ExperienceHandOff) -> None:
    """Render the caption, filtered image, and audio clip reference."""
    with st.container(border=True):
        st.subheader(handoff.caption)

        if handoff.image is not None:
            st.image(handoff.image, use_container_width=True)
        else:
            st.caption("No image")

        if handoff.audio_clip is not None and handoff.audio_clip.exists():
            st.markdown(f"**Audio**: `{handoff.audio_clip}`")
            try:
                wav = AudioProcessor().to_wav_bytes(handoff.audio_clip)
            except ValueError as exc:
                logger.warning("Clip not playable: %s", exc)
                st.caption("Clip saved but cannot be played back here")
            else:
                st.audio(wav, format="audio/wav")
        else:
            st.caption("No audio clip")

    if st.button("Start over"):
        st.session_state.composer = None
        st.session_state.handoff = None
        st.session_state.caption = ""
        st.session_state.last_upload_id = None
        st.session_state.last_clip_id = None
        st.session_state.pop("last_library_choice", None)
        st.switch_page("pages/01_compose.py")
