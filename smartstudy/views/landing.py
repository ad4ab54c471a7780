import time
import logging

import streamlit as st

from smartstudy import config
from smartstudy.models import User, ViewState

logger = logging.getLogger(__name__)

FEATURE_CARDS = [
    ("📄", "PDF Tutor", "Upload textbook chapters. Our AI reads them and quizzes you specifically on that content."),
    ("🧠", "Smart Quizzes", "Generate multiple-choice quizzes on any topic instantly with detailed explanations."),
    ("🎬", "Visual Learning", "Turn abstract concepts into 16:9 educational videos using the latest Veo models."),
]


def handle_auth_success(email):
    st.session_state.user = User.from_email(email)
    st.session_state.view = ViewState.DASHBOARD
    st.session_state.auth_open = False
    logger.info("Simulated sign-in for %s", st.session_state.user.name)


def show_auth_form():
    is_login = st.session_state.auth_mode == 'login'
    with st.container(border=True):
        st.subheader("Welcome Back" if is_login else "Create Account")
        st.caption("Enter your details to access your AI tutor." if is_login else "Start your smart learning journey today.")
        email = st.text_input("Email", placeholder="student@example.com", key="auth_email")
        password = st.text_input("Password", type="password", placeholder="••••••••", key="auth_password")

        if st.button("Sign In" if is_login else "Sign Up", type="primary", key="auth_submit", use_container_width=True):
            if not email.strip() or "@" not in email or not password:
                st.warning("Please enter a valid email and password.")
            else:
                # No real backend; only the network latency is simulated.
                with st.spinner("Signing you in..."):
                    time.sleep(config.AUTH_DELAY_SECONDS)
                handle_auth_success(email)
                st.rerun()

        col1, col2 = st.columns(2)
        toggle_label = "Don't have an account? Sign up" if is_login else "Already have an account? Sign in"
        if col1.button(toggle_label, key="auth_toggle"):
            st.session_state.auth_mode = 'signup' if is_login else 'login'
            st.rerun()
        if col2.button("Close", key="auth_close"):
            st.session_state.auth_open = False
            st.rerun()


# --- LANDING PAGE ---
def show_landing_page():
    st.markdown("""
        <style>
            .hero-container { padding: 4rem 1rem 2rem 1rem; text-align: center; }
            .hero-badge { display: inline-block; padding: 0.3rem 1rem; border-radius: 999px; border: 1px solid #E0E0E0; font-size: 0.75rem; font-weight: 700; letter-spacing: 0.08em; text-transform: uppercase; color: #B45309; }
            .hero-title { font-size: 3.5rem; font-weight: 800; line-height: 1.1; margin: 1rem 0; }
            .hero-title span { color: #2563EB; }
            .hero-subtitle { font-size: 1.25rem; color: #6B7280; max-width: 700px; margin: 0 auto 2rem auto; line-height: 1.6; }
            .custom-card { padding: 1.5rem; border-radius: 12px; border: 1px solid #E0E0E0; margin-bottom: 1.5rem; }
            .site-footer { text-align: center; color: #6B7280; font-size: 0.85rem; padding: 2rem 0; }
        </style>
    """, unsafe_allow_html=True)

    st.markdown("""
        <div class="hero-container">
            <div class="hero-badge">New: Veo Video Generation</div>
            <div class="hero-title">Master Any Subject<br/>with <span>AI Superpowers</span></div>
            <div class="hero-subtitle">Upload PDFs, generate quizzes, and visualize concepts with Gemini Pro. The all-in-one platform for modern students.</div>
        </div>
    """, unsafe_allow_html=True)

    _, center, _ = st.columns([1, 2, 1])
    with center:
        if st.session_state.user:
            if st.button("Go to Dashboard", type="primary", key="landing_dashboard", use_container_width=True):
                st.session_state.view = ViewState.DASHBOARD
                st.rerun()
        else:
            if st.button("Get Started for Free", type="primary", key="get_started", use_container_width=True):
                st.session_state.auth_open = True
                st.rerun()
            if st.session_state.auth_open:
                show_auth_form()

    st.divider()
    for col, (icon, title, desc) in zip(st.columns(3), FEATURE_CARDS):
        col.markdown(f'<div class="custom-card"><h3>{icon} {title}</h3><p>{desc}</p></div>', unsafe_allow_html=True)

    st.markdown(f'<div class="site-footer">&copy; 2024 {config.APP_NAME}. Built with Google Gemini.</div>', unsafe_allow_html=True)
