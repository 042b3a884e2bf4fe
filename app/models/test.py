from datetime import timedelta
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.utils.clock import utcnow

class Test(Base):
    __tablename__ = "tests"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), index=True, nullable=False)
    description = Column(String, nullable=True)
    created_by = Column(Integer, nullable=True)
    duration_minutes = Column(Integer, nullable=False)
    total_marks = Column(Integer, nullable=False, default=0)
    passing_marks = Column(Integer, nullable=False, default=0)
    instructions = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    start_time = Column(DateTime, nullable=True)
    end_time = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, onupdate=utcnow)

    questions = relationship(
        "Question", back_populates="test", cascade="all, delete-orphan",
        order_by="Question.order_index"
    )
    sessions = relationship("TestSession", back_populates="test")

    @property
    def duration(self) -> timedelta:
        return timedelta(minutes=self.duration_minutes)

    def is_available(self, now=None) -> bool:
        if not self.is_active:
            return False
        now = now or utcnow()
        if self.start_time is not None and now < self.start_time:
            return False
        if self.end_time is not None and now > self.end_time:
            return False
        return True
