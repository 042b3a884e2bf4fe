from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Boolean, UniqueConstraint
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.utils.clock import utcnow

class UserAnswer(Base):
    __tablename__ = "user_answers"
    __table_args__ = (
        UniqueConstraint("session_id", "question_id", name="uq_user_answers_session_question"),
    )

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("test_sessions.id", ondelete="CASCADE"), index=True, nullable=False)
    question_id = Column(Integer, ForeignKey("questions.id"), nullable=False)
    answer_text = Column(String, nullable=True)
    selected_option_id = Column(Integer, nullable=True)
    is_correct = Column(Boolean, nullable=True)
    marks_awarded = Column(Integer, nullable=False, default=0)
    answered_at = Column(DateTime, default=utcnow, nullable=False)

    session = relationship("TestSession", back_populates="answers")
    question = relationship("Question")
