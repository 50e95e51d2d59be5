from __future__ import annotations

from typing import Iterable, List, Optional, Type, TypeVar

import firebase_admin
from firebase_admin import credentials, firestore
from google.cloud.firestore_v1.base_query import FieldFilter
from pydantic import ValidationError

from ..logging import get_logger
from ..schemas import FeedbackRecord, InterviewPage, InterviewRecord
from ..schemas.base import CamelModel
from ..settings import FIREBASE_CREDENTIALS

logger = get_logger("firestore")

INTERVIEWS = "interviews"
FEEDBACK = "feedback"

R = TypeVar("R", bound=CamelModel)


def init_firestore(credential_path: Optional[str] = FIREBASE_CREDENTIALS):
    """Initialise the default firebase app once and return a Firestore client."""
    if not firebase_admin._apps:
        if credential_path:
            cred = credentials.Certificate(credential_path)
        else:
            cred = credentials.ApplicationDefault()
        firebase_admin.initialize_app(cred)
    return firestore.client()


class FirestoreRepository:
    """Read-only access to the `interviews` and `feedback` collections."""

    def __init__(self, db=None):
        self.db = db if db is not None else init_firestore()

    # ----------------- conversion -----------------
    def _records(self, docs: Iterable, model: Type[R]) -> List[R]:
        out: List[R] = []
        for doc in docs:
            rec = self._record(doc, model)
            if rec is not None:
                out.append(rec)
        return out

    @staticmethod
    def _record(doc, model: Type[R]) -> Optional[R]:
        data = doc.to_dict() or {}
        try:
            return model.model_validate({**data, "id": doc.id})
        except ValidationError as e:
            logger.warning(f"skipping {model.__name__} doc={doc.id}: {e.error_count()} invalid field(s)")
            return None

    def _by_user(self, collection: str, user_id: str, limit: int):
        # No order_by: userId equality + createdAt ordering needs a composite index.
        return (
            self.db.collection(collection)
            .where(filter=FieldFilter("userId", "==", user_id))
            .limit(limit)
            .stream()
        )

    # ----------------- stats reads -----------------
    def list_interviews_for_user(self, user_id: str, limit: int) -> List[InterviewRecord]:
        logger.debug(f"list_interviews_for_user user_id={user_id} limit={limit}")
        return self._records(self._by_user(INTERVIEWS, user_id, limit), InterviewRecord)

    def list_feedback_for_user(self, user_id: str, limit: int) -> List[FeedbackRecord]:
        logger.debug(f"list_feedback_for_user user_id={user_id} limit={limit}")
        return self._records(self._by_user(FEEDBACK, user_id, limit), FeedbackRecord)

    # ----------------- lookups -----------------
    def get_interview(self, interview_id: str) -> Optional[InterviewRecord]:
        doc = self.db.collection(INTERVIEWS).document(interview_id).get()
        if not doc.exists:
            return None
        return self._record(doc, InterviewRecord)

    def get_feedback_for_interview(self, interview_id: str, user_id: str) -> Optional[FeedbackRecord]:
        docs = list(
            self.db.collection(FEEDBACK)
            .where(filter=FieldFilter("interviewId", "==", interview_id))
            .where(filter=FieldFilter("userId", "==", user_id))
            .limit(1)
            .stream()
        )
        if not docs:
            return None
        return self._record(docs[0], FeedbackRecord)

    def page_interviews(self, user_id: str, *, scope: str = "user", page: int = 1, limit: int = 10) -> InterviewPage:
        """
        One page of interviews. scope "user" lists the caller's own interviews; any
        other scope lists finalized interviews created by other users.
        """
        query = self.db.collection(INTERVIEWS)
        if scope == "user":
            query = query.where(filter=FieldFilter("userId", "==", user_id))
        else:
            query = query.where(filter=FieldFilter("finalized", "==", True)).where(
                filter=FieldFilter("userId", "!=", user_id)
            )

        total = len(list(query.stream()))
        offset = (page - 1) * limit
        interviews = self._records(query.offset(offset).limit(limit).stream(), InterviewRecord)
        logger.debug(f"page_interviews user_id={user_id} scope={scope} page={page} total={total}")
        return InterviewPage(
            interviews=interviews,
            total=total,
            has_more=offset + limit < total,
            page=page,
            limit=limit,
        )
