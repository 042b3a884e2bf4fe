from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.core.constants import QuestionTypeEnum
from app.utils.clock import utcnow

class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    test_id = Column(Integer, ForeignKey("tests.id", ondelete="CASCADE"), index=True, nullable=False)
    question_text = Column(String, nullable=False)
    question_type = Column(
        Enum(QuestionTypeEnum, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False
    )
    marks = Column(Integer, nullable=False, default=1)
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, onupdate=utcnow)

    test = relationship("Test", back_populates="questions")
    options = relationship(
        "QuestionOption", back_populates="question", cascade="all, delete-orphan",
        order_by="QuestionOption.order_index"
    )
    correct_answers = relationship(
        "CorrectAnswer", back_populates="question", cascade="all, delete-orphan",
        order_by="CorrectAnswer.id"
    )


class QuestionOption(Base):
    __tablename__ = "question_options"

    id = Column(Integer, primary_key=True, index=True)
    question_id = Column(Integer, ForeignKey("questions.id", ondelete="CASCADE"), index=True, nullable=False)
    option_text = Column(String, nullable=False)
    is_correct = Column(Boolean, nullable=False, default=False)
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow)

    question = relationship("Question", back_populates="options")


class CorrectAnswer(Base):
    __tablename__ = "correct_answers"

    id = Column(Integer, primary_key=True, index=True)
    question_id = Column(Integer, ForeignKey("questions.id", ondelete="CASCADE"), index=True, nullable=False)
    answer_text = Column(String, nullable=False)
    is_case_sensitive = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow)

    question = relationship("Question", back_populates="correct_answers")
