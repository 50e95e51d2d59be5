from __future__ import annotations

from typing import Dict, List

from pydantic import Field

from .base import CamelModel
from .records import InterviewRecord


class RecentScore(CamelModel):
    score: int
    date: str
    interview_id: str


class TechStackScore(CamelModel):
    count: int = 0
    avg_score: int = 0


class WeeklyPoint(CamelModel):
    week: str
    interviews: int = 0
    average_score: int = 0


class MonthlyPoint(CamelModel):
    month: str
    interviews: int = 0
    average_score: int = 0


class PerformanceSnapshot(CamelModel):
    """Derived statistics for one user at one instant. Field order is the wire order."""

    total_interviews: int = 0
    completed_interviews: int = 0
    average_score: int = 0
    best_score: int = 0
    interviews_this_week: int = 0
    interviews_this_month: int = 0
    improvement_rate: int = 0
    category_averages: Dict[str, int] = Field(default_factory=dict)
    recent_scores: List[RecentScore] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    areas_for_improvement: List[str] = Field(default_factory=list)
    interview_types: Dict[str, int] = Field(default_factory=dict)
    tech_stack_performance: Dict[str, TechStackScore] = Field(default_factory=dict)
    weekly_progress: List[WeeklyPoint] = Field(default_factory=list)
    monthly_progress: List[MonthlyPoint] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "PerformanceSnapshot":
        return cls()


class InterviewPage(CamelModel):
    interviews: List[InterviewRecord] = Field(default_factory=list)
    total: int = 0
    has_more: bool = False
    page: int = 1
    limit: int = 10
