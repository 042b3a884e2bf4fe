from typing import List, Optional
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.user_answer import UserAnswer
from app.schemas.user_answer import UserAnswerCreate, UserAnswerUpdate

class CRUDUserAnswer(CRUDBase[UserAnswer, UserAnswerCreate, UserAnswerUpdate]):

    def get_by_session_and_question(self, db: Session, *, session_id: int,
                                    question_id: int) -> Optional[UserAnswer]:
        return (
            db.query(UserAnswer)
            .filter(UserAnswer.session_id == session_id)
            .filter(UserAnswer.question_id == question_id)
            .first()
        )

    def get_all_by_session(self, db: Session, *, session_id: int) -> List[UserAnswer]:
        return (
            db.query(UserAnswer)
            .filter(UserAnswer.session_id == session_id)
            .order_by(UserAnswer.answered_at.asc(), UserAnswer.id.asc())
            .all()
        )

user_answer = CRUDUserAnswer(UserAnswer)
