from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from app.core.config import settings

class UserAnswerBase(BaseModel):
    session_id: int
    question_id: int
    answer_text: Optional[str] = None
    selected_option_id: Optional[int] = None

    is_correct: Optional[bool] = None
    marks_awarded: int = 0

class UserAnswerCreate(UserAnswerBase):
    pass

class UserAnswerUpdate(BaseModel):
    answer_text: Optional[str] = None
    selected_option_id: Optional[int] = None
    is_correct: Optional[bool] = None
    marks_awarded: Optional[int] = None

class UserAnswer(UserAnswerBase):
    id: int
    answered_at: datetime

    model_config = ConfigDict(from_attributes=True)

class SubmitAnswerRequest(BaseModel):
    question_id: int = Field(..., gt=0)
    answer_text: Optional[str] = Field(default=None, max_length=settings.MAX_ANSWER_LENGTH)
    selected_option_id: Optional[int] = Field(default=None, gt=0)
