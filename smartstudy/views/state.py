import streamlit as st

from smartstudy.models import FeatureView, ViewState

# Keys that survive a tool switch
KEYS_TO_PRESERVE = ['user', 'view', 'tool_choice', 'active_feature']


def init_session_state():
    if 'user' not in st.session_state: st.session_state.user = None
    if 'view' not in st.session_state: st.session_state.view = ViewState.LANDING
    if 'active_feature' not in st.session_state: st.session_state.active_feature = FeatureView.PDF_TUTOR
    if 'auth_open' not in st.session_state: st.session_state.auth_open = False
    if 'auth_mode' not in st.session_state: st.session_state.auth_mode = 'login'


def reset_session():
    """
    Resets the state of the current tool by surgically removing tool-specific keys,
    preserving global state like the user and the active view.
    """
    keys_to_delete = [key for key in st.session_state.keys() if key not in KEYS_TO_PRESERVE]
    for key in keys_to_delete:
        del st.session_state[key]


def current_user():
    return st.session_state.get('user')


def award_points(amount=10):
    user = current_user()
    if user:
        user.award_points(amount)
