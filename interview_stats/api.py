from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from .cache import CacheGateway, InterviewPageGateway, make_redis_client
from .database import FirestoreRepository
from .logging import get_logger
from .scoring import StatsAggregator
from .settings import INTERVIEW_PAGE_LIMIT

logger = get_logger("api")


def _flag(name: str) -> bool:
    return request.args.get(name) == "true"


def _positive_int(name: str, default: int) -> Optional[int]:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def create_app(
    *,
    repository=None,
    cache=None,
    stats_gateway: Optional[CacheGateway] = None,
    interviews_gateway: Optional[InterviewPageGateway] = None,
) -> Flask:
    """
    Build the Flask app. Anything not passed in is wired from settings:
    Firestore for records, Redis for the cache.
    """
    if repository is None:
        repository = FirestoreRepository()
    if cache is None and (stats_gateway is None or interviews_gateway is None):
        cache = make_redis_client()
    stats_gateway = stats_gateway or CacheGateway(cache, StatsAggregator(repository))
    interviews_gateway = interviews_gateway or InterviewPageGateway(cache, repository)

    app = Flask(__name__)
    # snapshots are served in field order
    app.json.sort_keys = False

    @app.route("/api/user/stats", methods=["GET"])
    def user_stats():
        """Performance snapshot for one user; `refresh=true` bypasses the cache."""
        user_id = request.args.get("userId")
        if not user_id:
            return jsonify({"error": "User ID is required"}), 400
        try:
            snapshot = stats_gateway.get_or_compute(user_id, force_refresh=_flag("refresh"))
        except Exception:
            logger.exception(f"user stats failed user_id={user_id}")
            return jsonify({"error": "Failed to fetch user statistics"}), 500
        return jsonify(snapshot.to_wire())

    @app.route("/api/interviews", methods=["GET"])
    def interviews():
        user_id = request.args.get("userId")
        if not user_id:
            return jsonify({"error": "User ID is required"}), 400
        page = _positive_int("page", 1)
        limit = _positive_int("limit", INTERVIEW_PAGE_LIMIT)
        if page is None or limit is None:
            return jsonify({"error": "page and limit must be positive integers"}), 400
        scope = request.args.get("type") or "user"
        try:
            result = interviews_gateway.get_or_fetch(
                user_id, scope=scope, page=page, limit=limit, force_refresh=_flag("refresh")
            )
        except Exception:
            logger.exception(f"interview listing failed user_id={user_id}")
            return jsonify({"error": "Failed to fetch interviews"}), 500
        return jsonify(result.to_wire())

    @app.route("/api/feedback", methods=["GET"])
    def feedback():
        interview_id = request.args.get("interviewId")
        user_id = request.args.get("userId")
        if not interview_id or not user_id:
            return jsonify({"error": "Interview ID and User ID are required"}), 400
        try:
            record = repository.get_feedback_for_interview(interview_id, user_id)
        except Exception:
            logger.exception(f"feedback lookup failed interview_id={interview_id}")
            return jsonify({"error": "Failed to fetch feedback"}), 500
        if record is None:
            return jsonify({"error": "Feedback not found"}), 404
        return jsonify(record.to_wire())

    return app
