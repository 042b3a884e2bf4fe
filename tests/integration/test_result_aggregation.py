import pytest
from datetime import timedelta
from sqlalchemy.orm import Session

from app.core.constants import QuestionTypeEnum
from app.core.exceptions import NotFoundError
from app.crud.test_session import test_session as crud_test_session
from app.crud.user_answer import user_answer as crud_user_answer
from app.services.test_result import test_result_service
from app.services.test_session import test_session_service
from app.utils.clock import utcnow
from tests.helpers import factories


def _take_exam(db: Session, exam, user_id: int, answers, started_ago=None):
    """Start a session, answer, optionally backdate the start, and submit."""
    session = test_session_service.start_session(db, user_id=user_id, test_id=exam.test.id)
    for answer in answers:
        test_session_service.submit_answer(db, session.session_token, **answer)
    if started_ago is not None:
        session = test_session_service.get_session(db, session.session_token)
        crud_test_session.update(db, db_obj=session, obj_in={"started_at": utcnow() - started_ago})
    return test_session_service.submit_session(db, session.session_token)


def test_end_to_end_perfect_score(db_session: Session, sample_exam):
    outcome = _take_exam(db_session, sample_exam, user_id=1, answers=[
        {"question_id": sample_exam.mc_question.id, "selected_option_id": sample_exam.correct_option.id},
        {"question_id": sample_exam.short_question.id, "answer_text": "42"},
    ])

    result = outcome.result
    assert result.total_questions == 2
    assert result.answered_questions == 2
    assert result.correct_answers == 2
    assert result.total_marks == 10
    assert result.marks_obtained == 10
    assert result.percentage == 100.0
    assert result.grade == "A+"
    assert result.is_passed is True
    assert result.time_taken is not None and result.time_taken >= 0
    assert result.completed_at is not None

def test_partial_answers(db_session: Session, sample_exam):
    outcome = _take_exam(db_session, sample_exam, user_id=1, answers=[
        {"question_id": sample_exam.mc_question.id, "selected_option_id": sample_exam.wrong_option.id},
        {"question_id": sample_exam.short_question.id, "answer_text": " 42 "},
    ])

    result = outcome.result
    assert result.answered_questions == 2
    assert result.correct_answers == 1
    assert result.marks_obtained == 5
    assert result.percentage == 50.0
    assert result.grade == "C"
    assert result.is_passed is True

@pytest.mark.parametrize("marks, passed", [(50, True), (49, False)])
def test_pass_fail_uses_marks(db_session: Session, marks, passed):
    test = factories.create_exam(db_session, total_marks=100, passing_marks=50)
    question = factories.create_question(
        db_session, test.id, QuestionTypeEnum.SHORT_ANSWER, marks=marks, correct_answers=[("yes", False)]
    )
    session = test_session_service.start_session(db_session, user_id=1, test_id=test.id)
    test_session_service.submit_answer(db_session, session.session_token, question_id=question.id, answer_text="YES")

    result = test_session_service.submit_session(db_session, session.session_token).result

    assert result.marks_obtained == marks
    assert result.is_passed is passed

def test_zero_total_marks_gives_zero_percentage(db_session: Session):
    exam = factories.create_sample_exam(db_session, total_marks=0, passing_marks=0)

    outcome = _take_exam(db_session, exam, user_id=1, answers=[
        {"question_id": exam.short_question.id, "answer_text": "42"},
    ])

    assert outcome.result.percentage == 0.0
    assert outcome.result.grade == "F"

def test_time_taken_in_whole_seconds(db_session: Session, sample_exam):
    outcome = _take_exam(db_session, sample_exam, user_id=1, answers=[
        {"question_id": sample_exam.short_question.id, "answer_text": "42"},
    ], started_ago=timedelta(seconds=90))

    assert outcome.result.time_taken == 90

def test_calculate_result_is_idempotent(db_session: Session, sample_exam):
    outcome = _take_exam(db_session, sample_exam, user_id=1, answers=[
        {"question_id": sample_exam.short_question.id, "answer_text": "42"},
    ])
    original = outcome.result

    # Tamper with the stored answers; the stored result must not be recomputed
    for answer in crud_user_answer.get_all_by_session(db_session, session_id=outcome.session.id):
        crud_user_answer.update(db_session, db_obj=answer, obj_in={"marks_awarded": 0, "is_correct": False})

    again = test_result_service.calculate_result(db_session, outcome.session.id)

    assert again.id == original.id
    assert again.marks_obtained == 5
    assert again.correct_answers == 1

def test_calculate_result_for_missing_session(db_session: Session):
    with pytest.raises(NotFoundError):
        test_result_service.calculate_result(db_session, 999999)

def test_result_lookups(db_session: Session, sample_exam):
    outcome = _take_exam(db_session, sample_exam, user_id=3, answers=[])
    result = outcome.result

    assert test_result_service.get_result(db_session, result.id).id == result.id
    assert test_result_service.get_result_by_session(db_session, outcome.session.id).id == result.id
    assert test_result_service.get_result_by_user_and_test(db_session, 3, sample_exam.test.id).id == result.id
    assert [r.id for r in test_result_service.get_user_results(db_session, 3)] == [result.id]
    assert [r.id for r in test_result_service.get_test_results(db_session, sample_exam.test.id)] == [result.id]

    with pytest.raises(NotFoundError):
        test_result_service.get_result(db_session, 999999)
    with pytest.raises(NotFoundError):
        test_result_service.get_result_by_session(db_session, 999999)
    with pytest.raises(NotFoundError):
        test_result_service.get_result_by_user_and_test(db_session, 4, sample_exam.test.id)

def test_result_by_user_and_test_is_latest_attempt(db_session: Session, sample_exam):
    first = _take_exam(db_session, sample_exam, user_id=1, answers=[])
    second = _take_exam(db_session, sample_exam, user_id=1, answers=[
        {"question_id": sample_exam.short_question.id, "answer_text": "42"},
    ])

    assert second.session.id != first.session.id
    latest = test_result_service.get_result_by_user_and_test(db_session, 1, sample_exam.test.id)
    assert latest.id == second.result.id

def test_statistics(db_session: Session, sample_exam):
    _take_exam(db_session, sample_exam, user_id=1, answers=[
        {"question_id": sample_exam.mc_question.id, "selected_option_id": sample_exam.correct_option.id},
        {"question_id": sample_exam.short_question.id, "answer_text": "42"},
    ], started_ago=timedelta(seconds=100))
    _take_exam(db_session, sample_exam, user_id=2, answers=[
        {"question_id": sample_exam.mc_question.id, "selected_option_id": sample_exam.correct_option.id},
    ], started_ago=timedelta(seconds=201))
    # Never answered, so never started: no time taken
    _take_exam(db_session, sample_exam, user_id=3, answers=[])

    stats = test_result_service.get_test_statistics(db_session, sample_exam.test.id)

    assert stats.total_attempts == 3
    assert stats.completed_attempts == 3
    assert stats.passed_attempts == 2
    assert stats.average_score == pytest.approx(50.0)
    assert stats.highest_score == 100.0
    assert stats.lowest_score == 0.0
    assert stats.average_time_taken == 151

def test_statistics_without_results(db_session: Session, sample_exam):
    stats = test_result_service.get_test_statistics(db_session, sample_exam.test.id)

    assert stats.total_attempts == 0
    assert stats.passed_attempts == 0
    assert stats.average_score == 0.0
    assert stats.average_time_taken is None
