from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from ..utils.timestamps import parse_timestamp
from .base import CamelModel


class _Timestamped(CamelModel):
    created_at: str

    @field_validator("created_at")
    @classmethod
    def _must_parse(cls, value: str) -> str:
        parse_timestamp(value)
        return value

    @property
    def created(self) -> datetime:
        return parse_timestamp(self.created_at)


class InterviewRecord(_Timestamped):
    id: str
    user_id: str
    type: str = ""
    techstack: List[str] = Field(default_factory=list)
    finalized: bool = False
    role: Optional[str] = None
    level: Optional[str] = None
    questions: List[str] = Field(default_factory=list)

    @field_validator("techstack", "questions", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value


class CategoryScore(CamelModel):
    name: str
    score: int
    comment: str = ""


class FeedbackRecord(_Timestamped):
    id: str
    interview_id: str
    user_id: str
    total_score: int
    category_scores: List[CategoryScore] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    areas_for_improvement: List[str] = Field(default_factory=list)
    final_assessment: Optional[str] = None
    body_language_score: Optional[int] = None

    @field_validator("category_scores", "strengths", "areas_for_improvement", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value
