from .records import CategoryScore, FeedbackRecord, InterviewRecord
from .snapshot import (
    InterviewPage,
    MonthlyPoint,
    PerformanceSnapshot,
    RecentScore,
    TechStackScore,
    WeeklyPoint,
)

__all__ = [
    "CategoryScore",
    "FeedbackRecord",
    "InterviewRecord",
    "InterviewPage",
    "MonthlyPoint",
    "PerformanceSnapshot",
    "RecentScore",
    "TechStackScore",
    "WeeklyPoint",
]
