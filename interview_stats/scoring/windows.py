from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List

WEEK = timedelta(days=7)


@dataclass(frozen=True)
class Window:
    label: str
    start: datetime
    end: datetime

    def contains(self, ts: datetime) -> bool:
        return self.start <= ts < self.end


def weekly_windows(now: datetime, weeks: int = 8) -> List[Window]:
    # oldest first; the newest window ends at `now`
    out: List[Window] = []
    for k in range(weeks - 1, -1, -1):
        end = now - k * WEEK
        start = end - WEEK
        out.append(Window(label=start.date().isoformat(), start=start, end=end))
    return out


def _month_start(index: int) -> datetime:
    year, month0 = divmod(index, 12)
    return datetime(year, month0 + 1, 1, tzinfo=timezone.utc)


def monthly_windows(now: datetime, months: int = 6) -> List[Window]:
    # UTC calendar months, oldest first, ending with the month containing `now`
    current = now.astimezone(timezone.utc)
    index = current.year * 12 + current.month - 1
    out: List[Window] = []
    for k in range(months - 1, -1, -1):
        start = _month_start(index - k)
        out.append(Window(label=start.strftime("%Y-%m"), start=start, end=_month_start(index - k + 1)))
    return out
