from __future__ import annotations

import math
from collections import Counter
from typing import Iterable, List, Sequence


def round_half_up(value: float) -> int:
    """Round halves upward: 66.5 -> 67, -2.5 -> -2. Built-in round() sends halves to the even neighbour."""
    return int(math.floor(value + 0.5))


def mean_score(scores: Sequence[float]) -> int:
    if not scores:
        return 0
    return round_half_up(sum(scores) / len(scores))


def improvement_rate(scores_newest_first: Sequence[int], window: int = 5) -> int:
    """
    Percentage change between the newest `window` scores and the `window` before them.
    Needs at least 2*window scores; otherwise 0. A zero baseline also yields 0.
    """
    if len(scores_newest_first) < 2 * window:
        return 0
    recent = sum(scores_newest_first[:window]) / window
    previous = sum(scores_newest_first[window:2 * window]) / window
    if previous == 0:
        return 0
    return round_half_up((recent - previous) / previous * 100)


def top_labels(groups: Iterable[Iterable[str]], k: int = 5) -> List[str]:
    """Most frequent labels across all groups; equal counts are ordered alphabetically."""
    counts = Counter(label for group in groups for label in (group or []))
    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return [label for label, _ in ranked[:k]]
