"""
Composer component - binds the compose screen widgets to ExperienceComposer.

Each widget event is forwarded once: uploads and clips are remembered by
their widget file id so Streamlit reruns do not replay them.
"""

import logging

import streamlit as st

from experiences.core.config import get_settings
from experiences.core.exceptions import AudioSessionError, PermissionDeniedError
from experiences.services.audio import AudioProcessor, StaticPermissionProvider, create_audio_capture
from experiences.services.composer import ExperienceComposer
from experiences.services.media import create_media_picker

logger = logging.getLogger(__name__)

_UPLOAD_TYPES = ["jpg", "jpeg", "png", "heic", "gif", "bmp", "tif", "tiff", "webp"]


def get_composer() -> ExperienceComposer:
    """Return the session's composer, creating it on first use."""
    composer = st.session_state.get("composer")
    if composer is None:
        settings = get_settings()
        permissions = StaticPermissionProvider(settings.microphone_permission)
        composer = ExperienceComposer(create_audio_capture("file", permissions=permissions))
        st.session_state.composer = composer
    return composer


@st.dialog("Microphone Access Denied")
def _permission_denied_dialog(error: PermissionDeniedError) -> None:
    st.write(error.message)
    col1, col2 = st.columns(2)
    with col1:
        st.link_button("Open Settings", error.settings_url, use_container_width=True)
    with col2:
        if st.button("Cancel", use_container_width=True):
            st.rerun()


def _render_image_section(composer: ExperienceComposer) -> None:
    upload = st.file_uploader("Add image", type=_UPLOAD_TYPES)
    if upload is not None and upload.file_id != st.session_state.last_upload_id:
        st.session_state.last_upload_id = upload.file_id
        picker = create_media_picker("upload", data=upload.getvalue())
        if not composer.pick_image(picker):
            st.error("That file could not be opened as an image.")

    library = create_media_picker("library", choose=_choose_from_library)
    if library.is_available() and library.candidates():
        composer.pick_image(library)

    display = composer.images.display
    if display is not None:
        st.image(display, use_container_width=True)
    else:
        st.info("No image selected.")


def _choose_from_library(candidates):  # noqa: ANN001, ANN202
    """Selectbox over the library; the empty entry means cancelled."""
    options = [None, *candidates]
    chosen = st.selectbox(
        "Or pick from the photo library",
        options,
        format_func=lambda p: "(none)" if p is None else p.name,
        key="library_choice",
    )
    if chosen is None or chosen == st.session_state.get("last_library_choice"):
        return None
    st.session_state.last_library_choice = chosen
    return chosen


def _render_audio_section(composer: ExperienceComposer) -> None:
    clip = st.audio_input("Record audio")
    if clip is not None and clip.file_id != st.session_state.last_clip_id:
        st.session_state.last_clip_id = clip.file_id
        settings = get_settings()
        processor = AudioProcessor(
            sample_rate=settings.audio_sample_rate,
            channels=settings.audio_channels,
        )
        try:
            pcm = processor.decode_to_pcm(clip.getvalue())
            path = composer.record_clip(pcm)
        except PermissionDeniedError as exc:
            _permission_denied_dialog(exc)
            return
        except (AudioSessionError, ValueError) as exc:
            logger.warning("Recording failed: %s", exc)
            st.error(f"Recording failed: {exc}")
            return
        if path is None:
            st.info("Microphone access requested. Record again to capture a clip.")

    if composer.recording_path is not None:
        st.caption(f"Audio clip: `{composer.recording_path.name}`")


def render_composer() -> None:
    """Render the full compose screen."""
    composer = get_composer()

    _render_image_section(composer)
    st.divider()
    _render_audio_section(composer)
    st.divider()

    st.session_state.caption = st.text_input(
        "Title",
        value=st.session_state.caption,
        placeholder="e.g. Sunset at the pier",
    )

    if st.button("Next", type="primary"):
        handoff = composer.submit(st.session_state.caption)
        if handoff is None:
            st.warning("Add a title before continuing.")
        else:
            st.session_state.handoff = handoff
            st.switch_page("pages/02_review.py")
