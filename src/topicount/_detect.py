"""Leading-topic selection over per-topic totals."""

from __future__ import annotations

import logging
from typing import Mapping

logger = logging.getLogger(__name__)

UNDETERMINED = "undetermined"


def detect_topic(counts: Mapping[str, int]) -> str:
    """Return the topic with the strictly highest count.

    Ties go to the topic that comes first in the mapping's iteration order.
    When no topic has a positive count, returns ``UNDETERMINED``.
    """
    best = UNDETERMINED
    best_count = 0
    for topic, count in counts.items():
        if count > best_count:
            best = topic
            best_count = count

    if best_count == 0:
        logger.info("No leading topic: all %d topic counts are zero", len(counts))
    else:
        logger.info("Leading topic %r with %d matches", best, best_count)
    return best
