from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.constants import SessionStatusEnum
from app.core.exceptions import PermissionDeniedError, InvalidStateError
from app.schemas.response import APIResponse
from app.schemas.test_result import TestResult, TestStatistics
from app.schemas.user import UserContext
from app.services.test_result import test_result_service
from app.services.test_session import test_session_service
from app.utils import deps

router = APIRouter()

def _ensure_owner_or_staff(user_id: int, context: UserContext):
    if user_id != context.user_id and not context.is_staff:
        raise PermissionDeniedError("You do not have access to this result.")


@router.get("/me", response_model=APIResponse[List[TestResult]])
async def get_my_results(
    db: Session = Depends(deps.get_db),
    context: UserContext = Depends(deps.get_current_user_context),
    page: deps.Pagination = Depends()
):
    results = test_result_service.get_user_results(
        db, user_id=context.user_id, limit=page.limit, offset=page.offset
    )
    return APIResponse(message="Results retrieved successfully", data=[TestResult.model_validate(r) for r in results])


@router.get("/sessions/{session_id}", response_model=APIResponse[TestResult])
async def get_result_by_session(
    *,
    db: Session = Depends(deps.get_db),
    session_id: int,
    context: UserContext = Depends(deps.get_current_user_context)
):
    result = test_result_service.get_result_by_session(db, session_id=session_id)
    _ensure_owner_or_staff(result.user_id, context)
    return APIResponse(message="Result retrieved successfully", data=TestResult.model_validate(result))


@router.post("/sessions/{session_id}/calculate", response_model=APIResponse[TestResult])
async def calculate_result(
    *,
    db: Session = Depends(deps.get_transactional_db),
    session_id: int,
    context: UserContext = Depends(deps.get_current_user_context)
):
    session = test_session_service.get_session_by_id(db, session_id=session_id)
    _ensure_owner_or_staff(session.user_id, context)

    if session.status != SessionStatusEnum.SUBMITTED:
        raise InvalidStateError(
            "Only submitted sessions can be scored.",
            {"status": SessionStatusEnum(session.status).value}
        )

    result = test_result_service.calculate_result(db, session_id=session_id)
    return APIResponse(message="Result calculated successfully", data=TestResult.model_validate(result))


@router.get("/tests/{test_id}", response_model=APIResponse[List[TestResult]])
async def get_test_results(
    *,
    db: Session = Depends(deps.get_db),
    test_id: int,
    context: UserContext = Depends(deps.require_staff),
    page: deps.Pagination = Depends()
):
    results = test_result_service.get_test_results(db, test_id=test_id, limit=page.limit, offset=page.offset)
    return APIResponse(message="Test results retrieved successfully", data=[TestResult.model_validate(r) for r in results])


@router.get("/tests/{test_id}/statistics", response_model=APIResponse[TestStatistics])
async def get_test_statistics(
    *,
    db: Session = Depends(deps.get_db),
    test_id: int,
    context: UserContext = Depends(deps.require_staff)
):
    stats = test_result_service.get_test_statistics(db, test_id=test_id)
    return APIResponse(message="Test statistics retrieved successfully", data=stats)


@router.get("/tests/{test_id}/me", response_model=APIResponse[TestResult])
async def get_my_test_result(
    *,
    db: Session = Depends(deps.get_db),
    test_id: int,
    context: UserContext = Depends(deps.get_current_user_context)
):
    result = test_result_service.get_result_by_user_and_test(db, user_id=context.user_id, test_id=test_id)
    return APIResponse(message="Result retrieved successfully", data=TestResult.model_validate(result))


@router.get("/{result_id}", response_model=APIResponse[TestResult])
async def get_result(
    *,
    db: Session = Depends(deps.get_db),
    result_id: int,
    context: UserContext = Depends(deps.get_current_user_context)
):
    result = test_result_service.get_result(db, result_id=result_id)
    _ensure_owner_or_staff(result.user_id, context)
    return APIResponse(message="Result retrieved successfully", data=TestResult.model_validate(result))
