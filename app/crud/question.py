from typing import List
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.question import Question, QuestionOption, CorrectAnswer
from app.schemas.question import QuestionCreate, QuestionUpdate

class CRUDQuestion(CRUDBase[Question, QuestionCreate, QuestionUpdate]):
    def create(self, db: Session, *, obj_in: QuestionCreate, commit: bool = True) -> Question:
        data = obj_in.model_dump(exclude={"options", "correct_answers"})
        db_obj = Question(**data)
        db_obj.options = [QuestionOption(**opt.model_dump()) for opt in obj_in.options]
        db_obj.correct_answers = [CorrectAnswer(**ans.model_dump()) for ans in obj_in.correct_answers]
        db.add(db_obj)
        db.flush()
        if commit:
            db.commit()
        db.refresh(db_obj)
        return db_obj

    def get_by_test(self, db: Session, *, test_id: int) -> List[Question]:
        return (
            db.query(self.model)
            .filter(self.model.test_id == test_id)
            .order_by(self.model.order_index, self.model.id)
            .all()
        )

    def get_options(self, db: Session, *, question_id: int) -> List[QuestionOption]:
        return (
            db.query(QuestionOption)
            .filter(QuestionOption.question_id == question_id)
            .order_by(QuestionOption.order_index, QuestionOption.id)
            .all()
        )

    def get_correct_answers(self, db: Session, *, question_id: int) -> List[CorrectAnswer]:
        return (
            db.query(CorrectAnswer)
            .filter(CorrectAnswer.question_id == question_id)
            .order_by(CorrectAnswer.id)
            .all()
        )

question = CRUDQuestion(Question)
