from types import SimpleNamespace

from app.core.constants import QuestionTypeEnum
from app.services.scoring import score_answer, score_choice_answer, score_short_answer, INCORRECT


def _question(question_type, marks=5, id=1):
    return SimpleNamespace(id=id, question_type=question_type, marks=marks)

def _option(id, is_correct, question_id=1):
    return SimpleNamespace(id=id, is_correct=is_correct, question_id=question_id)

def _key(text, case_sensitive=False):
    return SimpleNamespace(answer_text=text, is_case_sensitive=case_sensitive)


def test_multiple_choice_correct_option_earns_full_marks():
    question = _question(QuestionTypeEnum.MULTIPLE_CHOICE, marks=5)
    options = [_option(1, True), _option(2, False)]

    outcome = score_answer(question, options=options, selected_option_id=1)

    assert outcome.is_correct is True
    assert outcome.marks_awarded == 5

def test_multiple_choice_wrong_or_missing_option_earns_nothing():
    question = _question(QuestionTypeEnum.MULTIPLE_CHOICE)
    options = [_option(1, True), _option(2, False)]

    assert score_answer(question, options=options, selected_option_id=2) == INCORRECT
    assert score_answer(question, options=options, selected_option_id=None) == INCORRECT
    assert score_answer(question, options=options, selected_option_id=999) == INCORRECT

def test_option_from_another_question_is_never_correct():
    question = _question(QuestionTypeEnum.MULTIPLE_CHOICE, id=1)
    foreign = _option(7, True, question_id=2)

    assert score_choice_answer(question, [foreign], 7) == INCORRECT

def test_true_false_is_scored_like_multiple_choice():
    question = _question(QuestionTypeEnum.TRUE_FALSE, marks=2)
    options = [_option(10, False), _option(11, True)]

    assert score_answer(question, options=options, selected_option_id=11).marks_awarded == 2
    assert score_answer(question, options=options, selected_option_id=10) == INCORRECT

def test_short_answer_case_insensitive_match():
    question = _question(QuestionTypeEnum.SHORT_ANSWER, marks=3)

    outcome = score_short_answer(question, [_key("Paris")], "  paris ")

    assert outcome.is_correct is True
    assert outcome.marks_awarded == 3

def test_short_answer_case_sensitive_requires_exact_text():
    question = _question(QuestionTypeEnum.SHORT_ANSWER)
    keys = [_key("Paris", case_sensitive=True)]

    assert score_short_answer(question, keys, "paris") == INCORRECT
    assert score_short_answer(question, keys, " Paris ").is_correct is True

def test_short_answer_any_registered_answer_matches():
    question = _question(QuestionTypeEnum.SHORT_ANSWER)
    keys = [_key("forty-two"), _key("42")]

    assert score_short_answer(question, keys, "42").is_correct is True

def test_blank_short_answer_is_incorrect():
    question = _question(QuestionTypeEnum.SHORT_ANSWER)

    assert score_short_answer(question, [_key("")], "   ") == INCORRECT
    assert score_short_answer(question, [_key("42")], None) == INCORRECT

def test_unknown_question_type_earns_nothing():
    question = _question("essay")

    assert score_answer(question, answer_text="anything", selected_option_id=1) == INCORRECT
