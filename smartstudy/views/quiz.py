import logging

import streamlit as st

from smartstudy import config
from smartstudy.services import gemini
from smartstudy.sessions import QuizSession
from smartstudy.views.state import award_points

logger = logging.getLogger(__name__)

QUIZ_FAILED = "Couldn't generate a quiz for that topic. Please try again."


def render_topic_input():
    st.write("Enter any topic and get a 5-question multiple choice quiz with explanations.")
    topic = st.text_input("Topic", placeholder="e.g., Photosynthesis, Calculus 101, World War II...", key="quiz_topic")
    if st.button("Generate Quiz", type="primary", disabled=not topic.strip(), key="quiz_generate"):
        with st.spinner(f"Generating a quiz about {topic.strip()}..."):
            try:
                questions = gemini.generate_quiz_from_topic(topic.strip())
            except Exception:
                logger.exception("Quiz generation failed")
                questions = []
        if questions:
            st.session_state.quiz_session = QuizSession(topic=topic.strip(), questions=questions)
            st.session_state.pop('quiz_error', None)
            st.rerun()
        st.session_state.quiz_error = QUIZ_FAILED
    if st.session_state.get('quiz_error'):
        st.error(st.session_state.quiz_error)


def render_checked_options(quiz):
    question = quiz.current_question
    for option in question.options:
        if option == question.correct_answer:
            st.markdown(f"✅ **{option}**")
        elif option == quiz.selected_option:
            st.markdown(f"❌ ~~{option}~~")
        else:
            st.markdown(f"▫️ {option}")


def render_question(quiz):
    question = quiz.current_question
    col1, col2 = st.columns([3, 1])
    col1.caption(f"Question {quiz.current_index + 1} of {quiz.total}")
    col2.caption(f"Score: {quiz.score}")
    st.progress((quiz.current_index + 1) / quiz.total)
    st.subheader(question.question)

    if not quiz.checked:
        choice = st.radio("Select your answer:", question.options, index=None,
                          key=f"quiz_option_{quiz.current_index}", label_visibility="collapsed")
        if choice != quiz.selected_option:
            quiz.select(choice)
        if st.button("Check Answer", type="primary", disabled=quiz.selected_option is None, key="quiz_check"):
            quiz.check_answer()
            st.rerun()
        return

    render_checked_options(quiz)
    if question.is_correct(quiz.selected_option):
        st.success("Correct!")
    else:
        st.error(f"Incorrect. The correct answer is: {question.correct_answer}")
    st.info(question.explanation)

    label = "Finish Quiz" if quiz.is_last_question else "Next Question"
    if st.button(label, type="primary", key="quiz_next"):
        result = quiz.next_question()
        if result and not quiz.points_awarded:
            award_points(result.score * config.QUIZ_POINTS_PER_CORRECT)
            quiz.points_awarded = True
        st.rerun()


def render_quiz_results(quiz):
    result = quiz.result()
    st.subheader("Quiz Complete!")
    st.metric("Your Score", f"{result.score} / {result.total}", f"{result.percent}%", delta_color="off")
    st.write(f"You earned **{result.score * config.QUIZ_POINTS_PER_CORRECT}** points on *{quiz.topic}*.")
    if st.button("Generate New Quiz", type="primary", key="quiz_new"):
        for key in ['quiz_session', 'quiz_topic', 'quiz_error']:
            if key in st.session_state: del st.session_state[key]
        st.rerun()


def show_quiz_panel():
    st.header("📝 Quiz Generator")
    quiz = st.session_state.get('quiz_session')
    if quiz is None:
        render_topic_input()
    elif quiz.finished:
        render_quiz_results(quiz)
    else:
        render_question(quiz)
