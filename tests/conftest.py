import pytest

from smartstudy import config
from smartstudy.models import QuizQuestion
from smartstudy.services import gemini


class FakeResponse:
    def __init__(self, text):
        self.text = text


class FakeGemini:
    """Stands in for google.generativeai's GenerativeModel and chat objects."""

    def __init__(self):
        self.replies = []
        self.models = []
        self.chats = []
        self.prompts = []
        self.configured_keys = []

    def queue(self, *replies):
        self.replies.extend(replies)

    def _next(self):
        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, BaseException):
            raise reply
        return FakeResponse(reply)

    def model_factory(self):
        fake = self

        class FakeChat:
            def __init__(self, history):
                self.history = history

            def send_message(self, message):
                fake.prompts.append(message)
                return fake._next()

        class FakeModel:
            def __init__(self, model_name, system_instruction=None):
                self.model_name = model_name
                self.system_instruction = system_instruction
                fake.models.append(self)

            def start_chat(self, history=None):
                chat = FakeChat(history)
                fake.chats.append(chat)
                return chat

            def generate_content(self, prompt, generation_config=None):
                fake.prompts.append(prompt)
                self.generation_config = generation_config
                return fake._next()

        return FakeModel


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def fake_gemini(monkeypatch, api_key):
    fake = FakeGemini()
    monkeypatch.setattr(gemini.genai, "GenerativeModel", fake.model_factory())
    monkeypatch.setattr(gemini.genai, "configure", lambda api_key: fake.configured_keys.append(api_key))
    monkeypatch.setattr(gemini.time, "sleep", lambda seconds: None)
    return fake


@pytest.fixture
def no_delays(monkeypatch):
    monkeypatch.setattr(config, "AUTH_DELAY_SECONDS", 0)


@pytest.fixture
def sample_questions():
    return [
        QuizQuestion(
            question="What organelle produces ATP?",
            options=["Nucleus", "Mitochondria", "Ribosome", "Golgi body"],
            correct_answer="Mitochondria",
            explanation="Mitochondria run cellular respiration.",
        ),
        QuizQuestion(
            question="What pigment captures light?",
            options=["Chlorophyll", "Keratin", "Melanin", "Hemoglobin"],
            correct_answer="Chlorophyll",
            explanation="Chlorophyll absorbs red and blue light.",
        ),
    ]
