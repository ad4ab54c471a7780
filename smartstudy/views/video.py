import logging

import streamlit as st

from smartstudy.models import GeneratedVideo
from smartstudy.services import veo

logger = logging.getLogger(__name__)

VIDEO_FAILED = "Failed to generate video. Please try again."
VIDEO_UNEXPECTED = "An unexpected error occurred."


def show_video_panel():
    st.header("🎬 Topic to Video")
    st.write("Turn an abstract concept into a short 16:9 educational clip.")

    video = st.session_state.get('video')
    if video:
        st.video(video.uri, autoplay=True)
        st.caption(f"Concept: {video.topic}")
        if st.button("Create Another", key="video_reset"):
            for key in ['video', 'video_topic', 'video_error']:
                if key in st.session_state: del st.session_state[key]
            st.rerun()
        return

    topic = st.text_input("What concept do you want to visualize?", placeholder="e.g. The structure of a DNA double helix", key="video_topic")
    if st.button("Create", type="primary", disabled=not topic.strip(), key="video_create"):
        st.session_state.pop('video_error', None)
        url = None
        with st.spinner("Generating your video. This can take a few minutes..."):
            try:
                url = veo.generate_educational_video(topic.strip())
                if not url:
                    st.session_state.video_error = VIDEO_FAILED
            except Exception as e:
                st.session_state.video_error = str(e) or VIDEO_UNEXPECTED
        if url:
            st.session_state.video = GeneratedVideo(uri=url, topic=topic.strip())
            st.rerun()
    if st.session_state.get('video_error'):
        st.error(st.session_state.video_error)
