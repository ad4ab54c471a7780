"""Educational video generation on Veo.

Veo jobs are long-running operations: the request returns at once and the
operation is polled until ``done``. Only the ``google-genai`` client exposes
these operations, so this module uses it instead of ``google.generativeai``.
"""
import time
import logging

from google import genai
from google.genai import types

from smartstudy import config

logger = logging.getLogger(__name__)


def build_video_prompt(topic):
    return (
        f"A high quality, educational, cinematic video explaining the concept of: {topic}. "
        "Abstract visualization, clear imagery, 16:9 aspect ratio."
    )


def get_video_client(api_key):
    return genai.Client(api_key=api_key)


def extract_video_uri(operation):
    response = getattr(operation, "response", None)
    videos = getattr(response, "generated_videos", None) if response else None
    if not videos:
        return None
    video = getattr(videos[0], "video", None)
    return getattr(video, "uri", None) if video else None


def generate_educational_video(topic, client=None, poll_interval=None):
    """Runs a Veo job for ``topic`` and returns a playable URL, or None.

    Blocks while the job runs, checking it every ``poll_interval`` seconds.
    Provider errors are logged and re-raised for the caller to report.
    """
    api_key = config.get_gemini_api_key()
    client = client or get_video_client(api_key)
    if poll_interval is None:
        poll_interval = config.VIDEO_POLL_INTERVAL_SECONDS

    try:
        operation = client.models.generate_videos(
            model=config.VIDEO_MODEL,
            prompt=build_video_prompt(topic),
            config=types.GenerateVideosConfig(
                number_of_videos=1,
                resolution=config.VIDEO_RESOLUTION,
                aspect_ratio=config.VIDEO_ASPECT_RATIO,
            ),
        )
        polls = 0
        while not operation.done:
            time.sleep(poll_interval)
            operation = client.operations.get(operation)
            polls += 1
            logger.debug("Video job for %r still running after %d polls", topic, polls)

        uri = extract_video_uri(operation)
        if uri:
            # The download link is only playable with the key attached.
            return f"{uri}&key={api_key}"
        logger.warning("Video job for %r finished without a video", topic)
        return None
    except Exception:
        logger.exception("Veo generation error")
        raise
