from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
import redis

from interview_stats.schemas import FeedbackRecord, InterviewPage, InterviewRecord

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def iso(ts: datetime) -> str:
    return ts.isoformat().replace("+00:00", "Z")


def make_interview(id, *, user_id="u1", created=NOW, type="Technical", techstack=None, finalized=True):
    return InterviewRecord(
        id=id,
        user_id=user_id,
        type=type,
        techstack=techstack or [],
        created_at=iso(created),
        finalized=finalized,
    )


def make_feedback(id, *, interview_id, score, user_id="u1", created=NOW, categories=None, strengths=None, areas=None):
    return FeedbackRecord(
        id=id,
        interview_id=interview_id,
        user_id=user_id,
        total_score=score,
        category_scores=[{"name": n, "score": s, "comment": ""} for n, s in (categories or [])],
        strengths=strengths or [],
        areas_for_improvement=areas or [],
        created_at=iso(created),
    )


class FakeRepository:
    """In-memory stand-in for FirestoreRepository that records every call."""

    def __init__(self, interviews=None, feedbacks=None):
        self.interviews = list(interviews or [])
        self.feedbacks = list(feedbacks or [])
        self.calls = []

    def list_interviews_for_user(self, user_id, limit):
        self.calls.append(("interviews", user_id, limit))
        return [i for i in self.interviews if i.user_id == user_id][:limit]

    def list_feedback_for_user(self, user_id, limit):
        self.calls.append(("feedback", user_id, limit))
        return [f for f in self.feedbacks if f.user_id == user_id][:limit]

    def get_feedback_for_interview(self, interview_id, user_id):
        self.calls.append(("feedback_for_interview", interview_id, user_id))
        for f in self.feedbacks:
            if f.interview_id == interview_id and f.user_id == user_id:
                return f
        return None

    def page_interviews(self, user_id, *, scope="user", page=1, limit=10):
        self.calls.append(("page", user_id, scope, page, limit))
        if scope == "user":
            rows = [i for i in self.interviews if i.user_id == user_id]
        else:
            rows = [i for i in self.interviews if i.finalized and i.user_id != user_id]
        offset = (page - 1) * limit
        return InterviewPage(
            interviews=rows[offset:offset + limit],
            total=len(rows),
            has_more=offset + limit < len(rows),
            page=page,
            limit=limit,
        )


class FailingRepository(FakeRepository):
    def list_interviews_for_user(self, user_id, limit):
        self.calls.append(("interviews", user_id, limit))
        raise RuntimeError("Database connection failed")


class FakeCache:
    """Dict-backed subset of the redis client API used by the gateways."""

    def __init__(self):
        self.store = {}
        self.ttls = {}
        self.gets = 0
        self.sets = 0

    def get(self, key):
        self.gets += 1
        return self.store.get(key)

    def setex(self, key, ttl, value):
        self.sets += 1
        self.store[key] = value
        self.ttls[key] = ttl


class BrokenCache:
    def __init__(self):
        self.gets = 0
        self.sets = 0

    def get(self, key):
        self.gets += 1
        raise redis.ConnectionError("Connection refused")

    def setex(self, key, ttl, value):
        self.sets += 1
        raise redis.TimeoutError("Timeout writing to socket")


class CountingAggregator:
    def __init__(self, inner):
        self.inner = inner
        self.calls = 0

    def compute_stats(self, user_id):
        self.calls += 1
        return self.inner.compute_stats(user_id)


def twelve_week_history():
    """
    12 interviews one week apart (newest 1h before NOW) and 10 feedbacks on the
    10 newest, scored 90..45 newest first.
    """
    scores = [90, 85, 80, 75, 70, 65, 60, 55, 50, 45]
    interviews = [
        make_interview(
            f"i{k}",
            created=NOW - timedelta(weeks=k, hours=1),
            type="Behavioral" if k % 3 == 0 else "Technical",
            techstack=["React", "TypeScript"] if k % 2 == 0 else ["Python"],
        )
        for k in range(12)
    ]
    feedbacks = [
        make_feedback(
            f"f{k}",
            interview_id=f"i{k}",
            score=score,
            created=NOW - timedelta(weeks=k, minutes=30),
            categories=[("Communication Skills", score), ("Technical Knowledge", score - 10)],
        )
        for k, score in enumerate(scores)
    ]
    return interviews, feedbacks


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def history():
    return twelve_week_history()


@pytest.fixture
def repository(history):
    interviews, feedbacks = history
    # store order is arbitrary; hand them back shuffled-ish
    return FakeRepository(interviews=interviews[::-1], feedbacks=feedbacks[3:] + feedbacks[:3])


@pytest.fixture
def cache():
    return FakeCache()
