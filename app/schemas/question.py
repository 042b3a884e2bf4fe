from pydantic import BaseModel, Field
from typing import Optional, List

from app.core.constants import QuestionTypeEnum

class QuestionOptionCreate(BaseModel):
    option_text: str
    is_correct: bool = False
    order_index: int = 0

class CorrectAnswerCreate(BaseModel):
    answer_text: str
    is_case_sensitive: bool = False

class QuestionBase(BaseModel):
    test_id: int
    question_text: str
    question_type: QuestionTypeEnum
    marks: int = Field(default=1, gt=0)
    order_index: int = 0

class QuestionCreate(QuestionBase):
    options: List[QuestionOptionCreate] = []
    correct_answers: List[CorrectAnswerCreate] = []

class QuestionUpdate(BaseModel):
    question_text: Optional[str] = None
    marks: Optional[int] = Field(default=None, gt=0)
    order_index: Optional[int] = None
