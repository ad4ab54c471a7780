import streamlit as st

from smartstudy import config
from smartstudy.config import ConfigurationError
from smartstudy.models import FeatureView, ViewState
from smartstudy.services import gemini
from smartstudy.views.landing import show_landing_page
from smartstudy.views.quiz import show_quiz_panel
from smartstudy.views.solver import show_solver_panel
from smartstudy.views.state import init_session_state, reset_session
from smartstudy.views.tutor import show_tutor_panel
from smartstudy.views.video import show_video_panel

PANELS = {
    FeatureView.PDF_TUTOR: show_tutor_panel,
    FeatureView.QUIZ_GEN: show_quiz_panel,
    FeatureView.ASSIGNMENT_SOLVER: show_solver_panel,
    FeatureView.VIDEO_GEN: show_video_panel,
}


@st.cache_data(ttl=300, show_spinner=False)
def get_api_status():
    return gemini.check_gemini_api()


def show_sidebar(user):
    st.sidebar.title(config.APP_NAME)
    st.sidebar.subheader(f"{user.initial} · Welcome, {user.name}")
    st.sidebar.metric("Points", user.points)
    col1, col2 = st.sidebar.columns(2)
    if col1.button("Home", key="nav_home", use_container_width=True):
        st.session_state.view = ViewState.LANDING; st.rerun()
    if col2.button("Logout", key="nav_logout", use_container_width=True):
        st.session_state.clear(); st.rerun()
    st.sidebar.divider()

    labels = [feature.label for feature in FeatureView]
    # The radio's own state is dropped while the landing page is shown
    active = st.session_state.active_feature
    tool_choice = st.sidebar.radio("Tools", labels, index=labels.index(active.label), key='tool_choice')

    feature = FeatureView.from_label(tool_choice)
    if feature != active:
        st.session_state.active_feature = feature
        reset_session(); st.rerun()

    st.sidebar.divider()
    with st.sidebar.container(border=True):
        st.markdown("**Pro Plan**")
        st.caption("Upgrade for 4K video & unlimited text.")
        st.button("Upgrade", key="pro_upgrade", disabled=True, use_container_width=True, help="Coming soon")

    st.sidebar.subheader("API Status")
    st.sidebar.write(f"Gemini: **{get_api_status()}**")
    return feature


def show_dashboard():
    try:
        config.get_gemini_api_key()
    except ConfigurationError as e:
        st.error(f"{e}. Set GEMINI_API_KEY or add 'api_key' under [gemini] in st.secrets.toml."); st.stop()

    feature = show_sidebar(st.session_state.user)
    PANELS[feature]()


# --- MAIN APP ---
def main():
    st.set_page_config(page_title=config.APP_NAME, page_icon="🎓", layout="wide")
    config.configure_logging()
    init_session_state()

    if st.session_state.user is None or st.session_state.view == ViewState.LANDING:
        st.markdown("<style>#MainMenu {visibility: hidden;} footer {visibility: hidden;}</style>", unsafe_allow_html=True)
        show_landing_page()
        return

    show_dashboard()


if __name__ == "__main__":
    main()
