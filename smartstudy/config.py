import os
import logging

import streamlit as st
from streamlit.errors import StreamlitAPIException

# --- CONFIGURATION & CONSTANTS ---
APP_NAME = "SmartStudy AI"
TUTOR_MODEL = os.getenv("SMARTSTUDY_TUTOR_MODEL", "gemini-3-flash-preview")
QUIZ_MODEL = os.getenv("SMARTSTUDY_QUIZ_MODEL", "gemini-3-flash-preview")
SOLVER_MODEL = os.getenv("SMARTSTUDY_SOLVER_MODEL", "gemini-3-pro-preview")
VIDEO_MODEL = os.getenv("SMARTSTUDY_VIDEO_MODEL", "veo-3.1-fast-generate-preview")

QUIZ_QUESTION_COUNT = 5
VIDEO_POLL_INTERVAL_SECONDS = float(os.getenv("SMARTSTUDY_VIDEO_POLL_INTERVAL", "5"))
VIDEO_RESOLUTION = "720p"
VIDEO_ASPECT_RATIO = "16:9"
MAX_RETRIES = 3

# Simulated sign-in latency
AUTH_DELAY_SECONDS = float(os.getenv("SMARTSTUDY_AUTH_DELAY", "1.5"))

# --- POINTS ---
TUTOR_CORRECT_POINTS = 5
QUIZ_POINTS_PER_CORRECT = 10


class ConfigurationError(RuntimeError):
    """Raised when a required credential is missing."""


def get_gemini_api_key():
    """Resolves the Gemini API key from the environment, then st.secrets."""
    for var in ("GEMINI_API_KEY", "API_KEY"):
        value = os.getenv(var)
        if value:
            return value
    try:
        value = st.secrets["gemini"]["api_key"]
    except (KeyError, FileNotFoundError, StreamlitAPIException):
        value = None
    if not value:
        raise ConfigurationError("API Key is missing from environment variables")
    return value


def configure_logging(level=None):
    level = level or os.getenv("SMARTSTUDY_LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
