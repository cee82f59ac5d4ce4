"""Change frequency heuristic

Estimates how often a page changes from its age and how many revisions it
has had over that lifetime.
"""

from datetime import datetime

from app.schemas.sitemap import ChangeFrequency

HOUR = 60 * 60
DAY = 24 * HOUR

# Checked in order, first match wins. Boundaries are exclusive.
THRESHOLDS = (
    (365 * DAY, ChangeFrequency.YEARLY),
    (30 * DAY, ChangeFrequency.MONTHLY),
    (7 * DAY, ChangeFrequency.WEEKLY),
    (DAY, ChangeFrequency.DAILY),
    (HOUR, ChangeFrequency.HOURLY),
)


def estimate_change_frequency(created_at: datetime, now: datetime,
                              revision_count: int) -> ChangeFrequency:
    """Average time between revisions, bucketed into a sitemap label.

    A ``created_at`` later than ``now`` counts as zero elapsed time.
    """
    elapsed = max((now - created_at).total_seconds(), 0.0)
    period = elapsed / (max(revision_count, 0) + 1)

    for threshold, label in THRESHOLDS:
        if period > threshold:
            return label
    return ChangeFrequency.ALWAYS
