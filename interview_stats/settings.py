from __future__ import annotations

import os
from dotenv import load_dotenv

# Load env early so modules can rely on it.
load_dotenv()


# Firestore service account (falls back to the standard Google variable)
FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS") or os.getenv("GOOGLE_APPLICATION_CREDENTIALS")

# Redis cache
REDIS_HOST = os.getenv("REDIS_HOST") or "localhost"
REDIS_PORT = int(os.getenv("REDIS_PORT") or 6379)
REDIS_PASSWORD = os.getenv("REDIS_PASSWORD") or None
REDIS_SOCKET_TIMEOUT = float(os.getenv("REDIS_SOCKET_TIMEOUT") or 1.0)

# Upper bound on records pulled per collection for one stats build; the rest of the history is not counted.
STATS_BATCH_SIZE = int(os.getenv("STATS_BATCH_SIZE") or 50)

INTERVIEW_PAGE_LIMIT = int(os.getenv("INTERVIEW_PAGE_LIMIT") or 10)
