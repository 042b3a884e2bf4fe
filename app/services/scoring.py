"""Answer scoring.

Pure functions: they only look at the question definition and the answer key
passed in, and never touch storage. Marks are all-or-nothing.
"""
from typing import Iterable, NamedTuple, Optional

from app.core.constants import QuestionTypeEnum, CHOICE_QUESTION_TYPES


class ScoreOutcome(NamedTuple):
    is_correct: bool
    marks_awarded: int


INCORRECT = ScoreOutcome(False, 0)


def score_choice_answer(question, options: Iterable, selected_option_id: Optional[int]) -> ScoreOutcome:
    if selected_option_id is None:
        return INCORRECT

    for option in options:
        if option.question_id != question.id:
            continue
        if option.id == selected_option_id and option.is_correct:
            return ScoreOutcome(True, question.marks)

    return INCORRECT


def score_short_answer(question, correct_answers: Iterable, answer_text: Optional[str]) -> ScoreOutcome:
    if answer_text is None or not answer_text.strip():
        return INCORRECT

    submitted = answer_text.strip()

    for correct_answer in correct_answers:
        expected = correct_answer.answer_text
        if correct_answer.is_case_sensitive:
            matched = submitted == expected
        else:
            matched = submitted.lower() == expected.lower()
        if matched:
            return ScoreOutcome(True, question.marks)

    return INCORRECT


def score_answer(
    question,
    *,
    options: Iterable = (),
    correct_answers: Iterable = (),
    answer_text: Optional[str] = None,
    selected_option_id: Optional[int] = None,
) -> ScoreOutcome:
    if question.question_type in CHOICE_QUESTION_TYPES:
        return score_choice_answer(question, options, selected_option_id)
    if question.question_type == QuestionTypeEnum.SHORT_ANSWER:
        return score_short_answer(question, correct_answers, answer_text)
    # Unrecognised question types never earn marks
    return INCORRECT
