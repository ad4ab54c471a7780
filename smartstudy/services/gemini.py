import re
import json
import time
import logging
from functools import wraps
from typing import List, TypedDict

import google.generativeai as genai
from google.api_core import exceptions

from smartstudy import config
from smartstudy.models import QuizQuestion

logger = logging.getLogger(__name__)

TUTOR_FALLBACK = "I'm having trouble thinking of a response right now. Try again?"
TUTOR_ERROR = "Sorry, I encountered an error while connecting to the AI tutor."
SOLVER_FALLBACK = "Could not generate a solution."
SOLVER_ERROR = "Error generating solution. Please try again later."

SOLVER_INSTRUCTION = (
    "You are an expert academic tutor. Provide clear, step-by-step solutions to the following "
    "assignment question. Show your work details and explain complex concepts simply."
)


class QuizQuestionSchema(TypedDict):
    question: str
    options: List[str]
    correctAnswer: str
    explanation: str


def configure_client():
    """Points the SDK at the current key. Raises ConfigurationError when no key is set."""
    api_key = config.get_gemini_api_key()
    genai.configure(api_key=api_key)
    return api_key


# --- EXPONENTIAL BACKOFF DECORATOR ---
def gemini_api_call_with_retry(func):
    """Decorator to handle Gemini API rate limiting with exponential backoff."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        retries = 0
        delay = 1
        while True:
            try:
                return func(*args, **kwargs)
            except exceptions.ResourceExhausted as e:
                retries += 1
                if retries >= config.MAX_RETRIES:
                    logger.error("API quota exceeded after %d attempts in %s", retries, func.__name__)
                    raise

                match = re.search(r'retry_delay {\s*seconds: (\d+)\s*}', str(e))
                if match:
                    wait_time = int(match.group(1)) + delay
                else:
                    wait_time = delay * (2 ** retries)

                logger.warning("Rate limit hit in %s. Retrying in %s seconds (attempt %d/%d)",
                               func.__name__, wait_time, retries, config.MAX_RETRIES)
                time.sleep(wait_time)
    return wrapper


# --- API SELF-DIAGNOSIS & UTILITIES ---
def check_gemini_api():
    try:
        configure_client()
        genai.get_model(f"models/{config.TUTOR_MODEL}")
        return "Valid"
    except Exception as e:
        logger.warning("Gemini API check failed: %s", e)
        return "Invalid"


def resilient_json_parser(json_string):
    """Parses a model reply that may wrap its JSON in a code fence or prose."""
    if not json_string:
        return None
    try:
        return json.loads(json_string)
    except json.JSONDecodeError:
        pass
    try:
        match = re.search(r'```(?:json)?\s*([\[{].*?[\]}])\s*```', json_string, re.DOTALL)
        if match:
            return json.loads(match.group(1))

        match = re.search(r'[\[{].*[\]}]', json_string, re.DOTALL)
        if match:
            return json.loads(match.group(0))

        return None
    except json.JSONDecodeError:
        logger.error("Could not parse an AI JSON response")
        return None


def build_tutor_instruction(context=None):
    context_line = f"The user is studying a document with the following context: {context}" if context else ""
    return f"""You are a friendly, human-like AI tutor for the {config.APP_NAME} platform.
    Your goal is to help students learn.
    {context_line}

    Behavior:
    - Ask probing questions to check understanding.
    - If the student answers correctly, praise them and explain *why* it's correct.
    - If wrong, give a helpful hint, do not just give the answer immediately.
    - Keep responses concise and encouraging.
    """


# --- RAW MODEL CALLS ---
@gemini_api_call_with_retry
def _send_chat_message(history, message, system_instruction):
    model = genai.GenerativeModel(config.TUTOR_MODEL, system_instruction=system_instruction)
    chat = model.start_chat(history=history)
    response = chat.send_message(message)
    return response.text


@gemini_api_call_with_retry
def _generate_quiz_json(topic):
    model = genai.GenerativeModel(config.QUIZ_MODEL)
    response = model.generate_content(
        f"Generate a {config.QUIZ_QUESTION_COUNT}-question multiple choice quiz about: {topic}.",
        generation_config=genai.GenerationConfig(
            response_mime_type="application/json",
            response_schema=list[QuizQuestionSchema],
        ),
    )
    return response.text


@gemini_api_call_with_retry
def _generate_solution(question):
    model = genai.GenerativeModel(config.SOLVER_MODEL, system_instruction=SOLVER_INSTRUCTION)
    response = model.generate_content(question)
    return response.text


# --- TOOL OPERATIONS ---
def generate_tutor_response(history, message, context=None):
    """Sends one tutoring turn.

    ``history`` holds the earlier turns in Gemini's content shape
    (``{"role": ..., "parts": [...]}``); ``message`` is the new user turn.
    Failures come back as an apology string rather than an exception.
    """
    configure_client()
    try:
        text = _send_chat_message(history, message, build_tutor_instruction(context))
        return text or TUTOR_FALLBACK
    except Exception:
        logger.exception("Gemini chat error")
        return TUTOR_ERROR


def parse_quiz(payload):
    if isinstance(payload, dict):
        payload = payload.get("questions", [])
    if not isinstance(payload, list):
        return []
    questions = []
    for item in payload:
        try:
            questions.append(QuizQuestion.from_dict(item))
        except (TypeError, ValueError) as e:
            logger.warning("Skipping malformed quiz question: %s", e)
    return questions


def generate_quiz_from_topic(topic):
    """Returns the generated questions, or an empty list when anything goes wrong."""
    configure_client()
    try:
        text = _generate_quiz_json(topic)
        if text:
            return parse_quiz(resilient_json_parser(text))
        return []
    except Exception:
        logger.exception("Gemini quiz error")
        return []


def solve_assignment(question):
    configure_client()
    try:
        return _generate_solution(question) or SOLVER_FALLBACK
    except Exception:
        logger.exception("Assignment solver error")
        return SOLVER_ERROR
