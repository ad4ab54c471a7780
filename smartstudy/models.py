"""Plain in-memory records shared by the views and the Gemini service layer."""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List


class ViewState(Enum):
    LANDING = "LANDING"
    DASHBOARD = "DASHBOARD"


class FeatureView(Enum):
    PDF_TUTOR = "PDF_TUTOR"
    QUIZ_GEN = "QUIZ_GEN"
    ASSIGNMENT_SOLVER = "ASSIGNMENT_SOLVER"
    VIDEO_GEN = "VIDEO_GEN"

    @property
    def label(self):
        return FEATURE_LABELS[self]

    @classmethod
    def from_label(cls, label):
        for feature, feature_label in FEATURE_LABELS.items():
            if feature_label == label:
                return feature
        raise ValueError(f"Unknown tool: {label}")


FEATURE_LABELS = {
    FeatureView.PDF_TUTOR: "AI Tutor Chat",
    FeatureView.QUIZ_GEN: "Quiz Generator",
    FeatureView.ASSIGNMENT_SOLVER: "Assignment Solver",
    FeatureView.VIDEO_GEN: "Topic to Video",
}


@dataclass
class User:
    id: str
    email: str
    name: str
    points: int = 0

    @classmethod
    def from_email(cls, email):
        """Builds the simulated account; the display name is the email's local part."""
        email = email.strip()
        return cls(id=str(uuid.uuid4()), email=email, name=email.split("@")[0], points=0)

    @property
    def initial(self):
        return self.name[:1].upper() if self.name else "?"

    def award_points(self, amount=10):
        self.points += amount
        return self.points


@dataclass
class ChatMessage:
    role: str  # 'user' | 'model'
    text: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_gemini(self):
        return {"role": "user" if self.role == "user" else "model", "parts": [self.text]}


@dataclass
class QuizQuestion:
    question: str
    options: List[str]
    correct_answer: str
    explanation: str

    @classmethod
    def from_dict(cls, data):
        """Builds a question from the provider's JSON object (``correctAnswer`` on the wire)."""
        missing = [k for k in ("question", "options", "correctAnswer", "explanation") if k not in data]
        if missing:
            raise ValueError(f"Quiz question is missing keys: {', '.join(missing)}")
        options = data["options"]
        if not isinstance(options, list) or not options:
            raise ValueError("Quiz question must have a non-empty list of options")
        return cls(
            question=str(data["question"]),
            options=[str(o) for o in options],
            correct_answer=str(data["correctAnswer"]),
            explanation=str(data["explanation"]),
        )

    def is_correct(self, option):
        return option == self.correct_answer


@dataclass
class QuizResult:
    score: int
    total: int

    @property
    def percent(self):
        return round(self.score / self.total * 100) if self.total else 0


@dataclass
class GeneratedVideo:
    uri: str
    topic: str
