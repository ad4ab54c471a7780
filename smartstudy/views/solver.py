import logging

import streamlit as st

from smartstudy.services import gemini

logger = logging.getLogger(__name__)

SOLVER_UI_ERROR = "Something went wrong. Please try again."


def show_solver_panel():
    st.header("✏️ Assignment Solver")
    col1, col2 = st.columns(2, gap="large")
    with col1:
        st.subheader("Your Question")
        question = st.text_area("Your Question", height=300, key="solver_question", label_visibility="collapsed",
                                placeholder="Paste your math problem, physics question, or coding assignment here...")
        if st.button("Solve with AI", type="primary", disabled=not question.strip(), key="solver_submit", use_container_width=True):
            st.session_state.solution = ""
            with st.spinner("Solving..."):
                try:
                    st.session_state.solution = gemini.solve_assignment(question)
                except Exception:
                    logger.exception("Assignment solver failed")
                    st.session_state.solution = SOLVER_UI_ERROR
    with col2:
        st.subheader("Solution")
        solution = st.session_state.get('solution')
        if solution:
            st.markdown(solution)
            with st.expander("Copy as plain text"):
                st.code(solution, language="markdown")
        else:
            st.info("Your step-by-step solution will appear here.")
