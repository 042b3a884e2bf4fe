from pydantic import BaseModel, Field, model_validator
from typing import Optional
from datetime import datetime

class TestBase(BaseModel):
    title: str
    description: Optional[str] = None
    created_by: Optional[int] = None
    duration_minutes: int = Field(..., gt=0)
    total_marks: int = Field(default=0, ge=0)
    passing_marks: int = Field(default=0, ge=0)
    instructions: Optional[str] = None
    is_active: bool = True
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

class TestCreate(TestBase):
    @model_validator(mode="after")
    def check_window(self):
        if self.start_time and self.end_time and self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        if self.passing_marks > self.total_marks:
            raise ValueError("passing_marks cannot exceed total_marks")
        return self

class TestUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    duration_minutes: Optional[int] = Field(default=None, gt=0)
    total_marks: Optional[int] = Field(default=None, ge=0)
    passing_marks: Optional[int] = Field(default=None, ge=0)
    instructions: Optional[str] = None
    is_active: Optional[bool] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
