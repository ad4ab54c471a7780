"""Transient tutor and quiz session state.

Both sessions live in ``st.session_state`` for the lifetime of a tool tab and
are thrown away when the user switches tools, starts over or logs out.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from smartstudy.models import ChatMessage, QuizQuestion, QuizResult

PRAISE_KEYWORDS = ("correct", "excellent")


def is_praise(text):
    """True when a tutor reply reads as praise for a right answer."""
    lowered = (text or "").lower()
    return any(word in lowered for word in PRAISE_KEYWORDS)


@dataclass
class TutorSession:
    document_name: Optional[str] = None
    messages: List[ChatMessage] = field(default_factory=list)

    @classmethod
    def start(cls, document_name):
        greeting = ChatMessage(
            role="model",
            text=(
                f'I\'ve analyzed "{document_name}". I\'m ready to help you study! '
                "What specific topic from this document would you like to review?"
            ),
        )
        return cls(document_name=document_name, messages=[greeting])

    @property
    def context(self):
        if not self.document_name:
            return None
        return f"Document Name: {self.document_name} (Assume standard textbook content for this topic)"

    def history_for_model(self):
        return [message.to_gemini() for message in self.messages]

    def add_user_message(self, text):
        message = ChatMessage(role="user", text=text)
        self.messages.append(message)
        return message

    def add_model_message(self, text):
        message = ChatMessage(role="model", text=text)
        self.messages.append(message)
        return message

    def reset(self):
        self.document_name = None
        self.messages.clear()


@dataclass
class QuizSession:
    topic: str
    questions: List[QuizQuestion]
    current_index: int = 0
    score: int = 0
    selected_option: Optional[str] = None
    checked: bool = False
    finished: bool = False
    points_awarded: bool = False

    @property
    def total(self):
        return len(self.questions)

    @property
    def current_question(self):
        return self.questions[self.current_index]

    @property
    def is_last_question(self):
        return self.current_index == self.total - 1

    def select(self, option):
        """Records a choice; ignored once the answer has been checked."""
        if self.checked or self.finished:
            return False
        if option is not None and option not in self.current_question.options:
            raise ValueError(f"Not an option for this question: {option}")
        self.selected_option = option
        return True

    def check_answer(self):
        """Locks the current answer and scores it.

        Returns True/False for a correct/incorrect answer, or None when there
        is nothing to check (no selection, or the question was already checked).
        """
        if self.selected_option is None or self.checked or self.finished:
            return None
        self.checked = True
        correct = self.current_question.is_correct(self.selected_option)
        if correct:
            self.score += 1
        return correct

    def next_question(self):
        """Advances past a checked question; returns the QuizResult after the last one."""
        if not self.checked or self.finished:
            return None
        if self.is_last_question:
            self.finished = True
            return self.result()
        self.current_index += 1
        self.selected_option = None
        self.checked = False
        return None

    def result(self):
        return QuizResult(score=self.score, total=self.total)
