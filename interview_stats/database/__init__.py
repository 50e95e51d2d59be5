from .firestore_repository import FEEDBACK, INTERVIEWS, FirestoreRepository, init_firestore

__all__ = ["FEEDBACK", "INTERVIEWS", "FirestoreRepository", "init_firestore"]
