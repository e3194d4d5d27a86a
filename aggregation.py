"""
Schedule aggregation — summary statistics over all extracted records.

Dates are canonical ``YYYY-MM-DD`` strings, so plain string comparison
gives chronological order for the date range.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List

from dto.document import DateRange, Summary
from dto.schedule import ScheduleRecord


def summarize(records: Iterable[ScheduleRecord]) -> Summary:
    """Return group list, per-group counts, date range and item count."""
    items: List[ScheduleRecord] = list(records)

    per_group = Counter(r.group for r in items if r.group)
    groups = sorted(per_group)

    dates = [r.date for r in items if r.date]

    return Summary(
        items=len(items),
        groups=groups,
        items_by_group={g: per_group[g] for g in groups},
        date_range=DateRange(
            from_=min(dates) if dates else None,
            to=max(dates) if dates else None,
        ),
    )
