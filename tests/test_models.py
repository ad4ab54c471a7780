import pytest

from smartstudy.models import ChatMessage, FeatureView, QuizQuestion, QuizResult, User


def test_user_from_email_uses_local_part_as_name():
    user = User.from_email("  ada.lovelace@example.com ")
    assert user.name == "ada.lovelace"
    assert user.email == "ada.lovelace@example.com"
    assert user.points == 0
    assert user.initial == "A"
    assert user.id


def test_award_points_defaults_to_ten():
    user = User.from_email("grace@example.com")
    user.award_points()
    user.award_points(5)
    assert user.points == 15


def test_chat_message_to_gemini_shape():
    assert ChatMessage(role="user", text="hi").to_gemini() == {"role": "user", "parts": ["hi"]}
    assert ChatMessage(role="model", text="hello").to_gemini()["role"] == "model"


def test_chat_messages_get_distinct_ids():
    assert ChatMessage(role="user", text="a").id != ChatMessage(role="user", text="a").id


def test_quiz_question_from_wire_dict():
    question = QuizQuestion.from_dict({
        "question": "2 + 2?",
        "options": ["3", "4"],
        "correctAnswer": "4",
        "explanation": "Basic arithmetic.",
    })
    assert question.correct_answer == "4"
    assert question.is_correct("4")
    assert not question.is_correct("3")


def test_quiz_question_rejects_missing_keys():
    with pytest.raises(ValueError, match="correctAnswer"):
        QuizQuestion.from_dict({"question": "q", "options": ["a"], "explanation": "e"})


def test_quiz_question_rejects_empty_options():
    with pytest.raises(ValueError):
        QuizQuestion.from_dict({"question": "q", "options": [], "correctAnswer": "a", "explanation": "e"})


def test_quiz_result_percent():
    assert QuizResult(score=3, total=5).percent == 60
    assert QuizResult(score=0, total=0).percent == 0


def test_feature_labels_round_trip():
    for feature in FeatureView:
        assert FeatureView.from_label(feature.label) is feature
    with pytest.raises(ValueError):
        FeatureView.from_label("Flashcards")
