import logging

import streamlit as st

from smartstudy import config
from smartstudy.services import gemini
from smartstudy.sessions import TutorSession, is_praise
from smartstudy.views.state import award_points

logger = logging.getLogger(__name__)

UPLOAD_TYPES = ['pdf', 'txt', 'md', 'docx']


def send_tutor_message(session, prompt):
    """Runs one chat turn and awards points when the tutor praises the answer."""
    if not prompt.strip():
        return
    history = session.history_for_model()
    session.add_user_message(prompt)
    with st.chat_message("user"): st.markdown(prompt)

    with st.chat_message("assistant"):
        with st.spinner("Thinking..."):
            try:
                reply = gemini.generate_tutor_response(history, prompt, session.context)
            except Exception:
                logger.exception("Tutor turn failed")
                reply = None
        if reply is None:
            st.error("Something went wrong. Please try again.")
            return
        st.markdown(reply)

    session.add_model_message(reply)
    if is_praise(reply):
        award_points(config.TUTOR_CORRECT_POINTS)
        st.rerun()


def show_upload_state():
    st.markdown("Upload a PDF, lecture notes, or textbook chapter. Our AI will analyze it and become your personal tutor.")
    uploaded_file = st.file_uploader("Select PDF File", type=UPLOAD_TYPES, key="tutor_upload")
    if uploaded_file is not None:
        st.session_state.tutor_session = TutorSession.start(uploaded_file.name)
        st.rerun()


def show_chat_state(session):
    col1, col2 = st.columns([4, 1])
    with col1:
        st.subheader(f"📄 {session.document_name}")
        st.caption("AI Tutor Active")
    with col2:
        if st.button("End Session", key="tutor_reset", use_container_width=True):
            session.reset()
            del st.session_state['tutor_session']
            st.rerun()

    for message in session.messages:
        with st.chat_message("user" if message.role == "user" else "assistant"):
            st.markdown(message.text)

    if prompt := st.chat_input("Type your answer or ask a question...", key="tutor_input"):
        send_tutor_message(session, prompt)


def show_tutor_panel():
    st.header("💬 AI Tutor Chat")
    session = st.session_state.get('tutor_session')
    if session is None or (not session.document_name and not session.messages):
        show_upload_state()
    else:
        show_chat_state(session)
