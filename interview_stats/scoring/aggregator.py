from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

from ..logging import get_logger
from ..schemas import (
    FeedbackRecord,
    InterviewRecord,
    MonthlyPoint,
    PerformanceSnapshot,
    RecentScore,
    TechStackScore,
    WeeklyPoint,
)
from ..settings import STATS_BATCH_SIZE
from .metrics import improvement_rate, mean_score, top_labels
from .windows import Window, monthly_windows, weekly_windows

logger = get_logger("stats")

RECENT_LIMIT = 10
TOP_LABELS = 5


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StatsAggregator:
    """
    Builds a PerformanceSnapshot for one user from their interview and feedback records.

    `store` needs two read methods, ``list_interviews_for_user(user_id, limit)`` and
    ``list_feedback_for_user(user_id, limit)``. Results come back unordered and are
    sorted newest-first here. Only the first `batch_size` records of each collection
    are considered; store errors propagate to the caller.
    """

    def __init__(self, store, batch_size: int = STATS_BATCH_SIZE, clock: Optional[Callable[[], datetime]] = None):
        self.store = store
        self.batch_size = int(batch_size)
        self.clock = clock or _utcnow

    def compute_stats(self, user_id: str) -> PerformanceSnapshot:
        interviews = self._newest_first(self.store.list_interviews_for_user(user_id, limit=self.batch_size))
        if not interviews:
            logger.debug(f"compute_stats user_id={user_id}: no interviews")
            return PerformanceSnapshot.empty()

        feedbacks = self._newest_first(self.store.list_feedback_for_user(user_id, limit=self.batch_size))
        logger.debug(f"compute_stats user_id={user_id} interviews={len(interviews)} feedbacks={len(feedbacks)}")

        now = self.clock().astimezone(timezone.utc)
        scores = [f.total_score for f in feedbacks]

        snapshot = PerformanceSnapshot(
            total_interviews=len(interviews),
            completed_interviews=len(feedbacks),
            average_score=mean_score(scores),
            best_score=max(scores) if scores else 0,
            interviews_this_week=self._created_since(interviews, now - timedelta(days=7)),
            interviews_this_month=self._created_since(interviews, now - timedelta(days=30)),
            improvement_rate=improvement_rate(scores),
            category_averages=self._category_averages(feedbacks),
            recent_scores=[
                RecentScore(score=f.total_score, date=f.created_at, interview_id=f.interview_id)
                for f in feedbacks[:RECENT_LIMIT]
            ],
            strengths=top_labels((f.strengths for f in feedbacks), k=TOP_LABELS),
            areas_for_improvement=top_labels((f.areas_for_improvement for f in feedbacks), k=TOP_LABELS),
            interview_types=self._interview_types(interviews),
            tech_stack_performance=self._tech_stack_performance(interviews, feedbacks),
            weekly_progress=[
                WeeklyPoint(week=w.label, **self._window_counts(w, interviews, feedbacks))
                for w in weekly_windows(now)
            ],
            monthly_progress=[
                MonthlyPoint(month=w.label, **self._window_counts(w, interviews, feedbacks))
                for w in monthly_windows(now)
            ],
        )
        logger.thinking(
            "stats user_id=%s total=%d completed=%d avg=%d best=%d improvement=%d",
            user_id,
            snapshot.total_interviews,
            snapshot.completed_interviews,
            snapshot.average_score,
            snapshot.best_score,
            snapshot.improvement_rate,
        )
        return snapshot

    # ----------------- helpers -----------------
    @staticmethod
    def _newest_first(records):
        return sorted(records or [], key=lambda r: r.created, reverse=True)

    @staticmethod
    def _created_since(interviews: List[InterviewRecord], since: datetime) -> int:
        return sum(1 for i in interviews if i.created >= since)

    @staticmethod
    def _category_averages(feedbacks: List[FeedbackRecord]) -> Dict[str, int]:
        by_name: Dict[str, List[int]] = {}
        for f in feedbacks:
            for category in f.category_scores:
                by_name.setdefault(category.name, []).append(category.score)
        return {name: mean_score(values) for name, values in by_name.items()}

    @staticmethod
    def _interview_types(interviews: List[InterviewRecord]) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for i in interviews:
            counts[i.type] = counts.get(i.type, 0) + 1
        return counts

    @staticmethod
    def _tech_stack_performance(
        interviews: List[InterviewRecord], feedbacks: List[FeedbackRecord]
    ) -> Dict[str, TechStackScore]:
        counts: Dict[str, int] = {}
        interview_ids: Dict[str, set] = {}
        for i in interviews:
            for tech in i.techstack:
                counts[tech] = counts.get(tech, 0) + 1
                interview_ids.setdefault(tech, set()).add(i.id)

        out: Dict[str, TechStackScore] = {}
        for tech, count in counts.items():
            ids = interview_ids[tech]
            scores = [f.total_score for f in feedbacks if f.interview_id in ids]
            out[tech] = TechStackScore(count=count, avg_score=mean_score(scores))
        return out

    @staticmethod
    def _window_counts(window: Window, interviews: List[InterviewRecord], feedbacks: List[FeedbackRecord]) -> dict:
        scores = [f.total_score for f in feedbacks if window.contains(f.created)]
        return {
            "interviews": sum(1 for i in interviews if window.contains(i.created)),
            "average_score": mean_score(scores),
        }
