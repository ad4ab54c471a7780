import json

import pytest
from google.api_core import exceptions

from smartstudy import config
from smartstudy.config import ConfigurationError
from smartstudy.services import gemini

QUIZ_JSON = json.dumps([
    {"question": "2 + 2?", "options": ["3", "4", "5", "6"], "correctAnswer": "4", "explanation": "Arithmetic."},
    {"question": "Capital of France?", "options": ["Paris", "Rome"], "correctAnswer": "Paris", "explanation": "Geography."},
])


def test_tutor_response_sends_history_and_context(fake_gemini):
    fake_gemini.queue("Excellent! That's correct.")
    history = [{"role": "model", "parts": ["Hi, what shall we study?"]}]

    reply = gemini.generate_tutor_response(history, "Photosynthesis", context="Document Name: bio.pdf")

    assert reply == "Excellent! That's correct."
    assert fake_gemini.configured_keys == ["test-key"]
    model = fake_gemini.models[0]
    assert model.model_name == config.TUTOR_MODEL
    assert "Document Name: bio.pdf" in model.system_instruction
    assert fake_gemini.chats[0].history == history
    assert fake_gemini.prompts == ["Photosynthesis"]


def test_tutor_instruction_without_context():
    instruction = gemini.build_tutor_instruction()
    assert "following context" not in instruction
    assert "do not just give the answer" in instruction


def test_tutor_empty_reply_falls_back(fake_gemini):
    fake_gemini.queue("")
    assert gemini.generate_tutor_response([], "hello") == gemini.TUTOR_FALLBACK


def test_tutor_error_becomes_apology(fake_gemini):
    fake_gemini.queue(RuntimeError("boom"))
    assert gemini.generate_tutor_response([], "hello") == gemini.TUTOR_ERROR


def test_missing_key_raises_before_calling(monkeypatch, fake_gemini):
    monkeypatch.setattr(gemini.config, "get_gemini_api_key", _raise_missing)
    with pytest.raises(ConfigurationError):
        gemini.solve_assignment("x")
    assert fake_gemini.models == []


def _raise_missing():
    raise ConfigurationError("API Key is missing from environment variables")


def test_quiz_parses_structured_output(fake_gemini):
    fake_gemini.queue(QUIZ_JSON)

    questions = gemini.generate_quiz_from_topic("Basics")

    assert [q.correct_answer for q in questions] == ["4", "Paris"]
    assert fake_gemini.prompts == ["Generate a 5-question multiple choice quiz about: Basics."]
    generation_config = fake_gemini.models[0].generation_config
    assert generation_config.response_mime_type == "application/json"


def test_quiz_accepts_fenced_json(fake_gemini):
    fake_gemini.queue(f"Here you go:\n```json\n{QUIZ_JSON}\n```")
    assert len(gemini.generate_quiz_from_topic("Basics")) == 2


def test_quiz_skips_malformed_questions(fake_gemini):
    fake_gemini.queue(json.dumps([
        {"question": "no answer", "options": ["a"], "explanation": "e"},
        {"question": "ok", "options": ["a", "b"], "correctAnswer": "a", "explanation": "e"},
    ]))
    questions = gemini.generate_quiz_from_topic("Mixed")
    assert [q.question for q in questions] == ["ok"]


@pytest.mark.parametrize("reply", ["", "not json at all", RuntimeError("network down")])
def test_quiz_failures_return_empty_list(fake_gemini, reply):
    fake_gemini.queue(reply)
    assert gemini.generate_quiz_from_topic("Anything") == []


def test_solve_assignment_uses_solver_model(fake_gemini):
    fake_gemini.queue("Step 1: ...")
    assert gemini.solve_assignment("Integrate x dx") == "Step 1: ..."
    model = fake_gemini.models[0]
    assert model.model_name == config.SOLVER_MODEL
    assert model.system_instruction == gemini.SOLVER_INSTRUCTION
    assert fake_gemini.prompts == ["Integrate x dx"]


def test_solve_assignment_fallbacks(fake_gemini):
    fake_gemini.queue("", ValueError("blocked"))
    assert gemini.solve_assignment("q") == gemini.SOLVER_FALLBACK
    assert gemini.solve_assignment("q") == gemini.SOLVER_ERROR


def test_rate_limit_retried_with_backoff(monkeypatch, fake_gemini):
    waits = []
    monkeypatch.setattr(gemini.time, "sleep", waits.append)
    fake_gemini.queue(exceptions.ResourceExhausted("quota"), exceptions.ResourceExhausted("quota"), "Solved")

    assert gemini.solve_assignment("q") == "Solved"
    assert waits == [2, 4]


def test_rate_limit_honours_server_delay(monkeypatch, fake_gemini):
    waits = []
    monkeypatch.setattr(gemini.time, "sleep", waits.append)
    fake_gemini.queue(exceptions.ResourceExhausted("quota retry_delay {\n  seconds: 7\n}"), "Solved")

    assert gemini.solve_assignment("q") == "Solved"
    assert waits == [8]


def test_rate_limit_gives_up_after_max_retries(monkeypatch, fake_gemini):
    waits = []
    monkeypatch.setattr(gemini.time, "sleep", waits.append)
    fake_gemini.queue(*[exceptions.ResourceExhausted("quota")] * config.MAX_RETRIES)

    assert gemini.solve_assignment("q") == gemini.SOLVER_ERROR
    assert len(waits) == config.MAX_RETRIES - 1


@pytest.mark.parametrize("text,expected", [
    ('{"a": 1}', {"a": 1}),
    ('[1, 2]', [1, 2]),
    ('```json\n{"a": 1}\n```', {"a": 1}),
    ('Sure! {"a": 1} Hope that helps.', {"a": 1}),
    ("no json here", None),
    ("", None),
    ("{broken", None),
])
def test_resilient_json_parser(text, expected):
    assert gemini.resilient_json_parser(text) == expected


def test_check_gemini_api(monkeypatch, fake_gemini):
    monkeypatch.setattr(gemini.genai, "get_model", lambda name: {"name": name})
    assert gemini.check_gemini_api() == "Valid"

    def fail(name):
        raise RuntimeError("API key not valid")
    monkeypatch.setattr(gemini.genai, "get_model", fail)
    assert gemini.check_gemini_api() == "Invalid"
