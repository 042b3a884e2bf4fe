from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.exceptions import PermissionDeniedError
from app.schemas.response import APIResponse
from app.schemas.test_session import (
    TestSession, TestSessionDetails, StartSessionRequest, ProgressUpdate, SessionSubmission
)
from app.schemas.user import UserContext
from app.schemas.user_answer import UserAnswer, SubmitAnswerRequest
from app.services.test_session import test_session_service
from app.utils import deps

router = APIRouter()

def _ensure_owner(session, context: UserContext):
    if session.user_id != context.user_id:
        raise PermissionDeniedError("You can only act on your own test sessions.")

def _ensure_owner_or_staff(session, context: UserContext):
    if session.user_id != context.user_id and not context.is_staff:
        raise PermissionDeniedError("You do not have access to this test session.")


@router.post("/", response_model=APIResponse[TestSession], status_code=status.HTTP_201_CREATED)
async def start_session(
    *,
    db: Session = Depends(deps.get_transactional_db),
    session_in: StartSessionRequest,
    context: UserContext = Depends(deps.get_current_user_context)
):
    session = test_session_service.start_session(db, user_id=context.user_id, test_id=session_in.test_id)
    return APIResponse(message="Test session started successfully", data=TestSession.model_validate(session))


@router.get("/me", response_model=APIResponse[List[TestSession]])
async def get_my_sessions(
    db: Session = Depends(deps.get_db),
    context: UserContext = Depends(deps.get_current_user_context),
    page: deps.Pagination = Depends()
):
    sessions = test_session_service.get_user_sessions(
        db, user_id=context.user_id, limit=page.limit, offset=page.offset
    )
    return APIResponse(message="Test sessions retrieved successfully", data=[TestSession.model_validate(s) for s in sessions])


@router.get("/{session_token}", response_model=APIResponse[TestSessionDetails])
async def get_session(
    *,
    db: Session = Depends(deps.get_db),
    session_token: str,
    context: UserContext = Depends(deps.get_current_user_context)
):
    session = test_session_service.get_session(db, session_token)
    _ensure_owner_or_staff(session, context)

    details = TestSessionDetails.model_validate(
        {**TestSession.model_validate(session).model_dump(), "remaining_time": session.remaining_time()}
    )
    return APIResponse(message="Test session retrieved successfully", data=details)


@router.post("/{session_token}/answers", response_model=APIResponse[UserAnswer])
async def submit_answer(
    *,
    db: Session = Depends(deps.get_transactional_db),
    session_token: str,
    answer_in: SubmitAnswerRequest,
    context: UserContext = Depends(deps.get_current_user_context)
):
    _ensure_owner(test_session_service.get_session(db, session_token), context)

    answer = test_session_service.submit_answer(
        db,
        session_token,
        question_id=answer_in.question_id,
        answer_text=answer_in.answer_text,
        selected_option_id=answer_in.selected_option_id,
    )
    return APIResponse(message="Answer submitted successfully", data=UserAnswer.model_validate(answer))


@router.get("/{session_token}/answers", response_model=APIResponse[List[UserAnswer]])
async def get_session_answers(
    *,
    db: Session = Depends(deps.get_db),
    session_token: str,
    context: UserContext = Depends(deps.get_current_user_context)
):
    _ensure_owner_or_staff(test_session_service.get_session(db, session_token), context)

    answers = test_session_service.get_session_answers(db, session_token)
    return APIResponse(message="Answers retrieved successfully", data=[UserAnswer.model_validate(a) for a in answers])


@router.put("/{session_token}/progress", response_model=APIResponse[TestSession])
async def update_progress(
    *,
    db: Session = Depends(deps.get_transactional_db),
    session_token: str,
    progress_in: ProgressUpdate,
    context: UserContext = Depends(deps.get_current_user_context)
):
    _ensure_owner(test_session_service.get_session(db, session_token), context)

    session = test_session_service.update_progress(
        db, session_token, current_question_index=progress_in.current_question_index
    )
    return APIResponse(message="Progress updated successfully", data=TestSession.model_validate(session))


@router.post("/{session_token}/submit", response_model=APIResponse[SessionSubmission])
async def submit_session(
    *,
    db: Session = Depends(deps.get_transactional_db),
    session_token: str,
    context: UserContext = Depends(deps.get_current_user_context)
):
    _ensure_owner(test_session_service.get_session(db, session_token), context)

    outcome = test_session_service.submit_session(db, session_token)
    message = "Test submitted successfully"
    if outcome.result_error:
        message = "Test submitted, but the result could not be calculated yet"
    return APIResponse(message=message, data=SessionSubmission.model_validate(outcome))
