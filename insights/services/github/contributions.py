"""
Contribution calendar built from push events.

GitHub only exposes the real contribution calendar over GraphQL, so this
approximates it: each PushEvent adds its commit count to the day it
happened. The calendar is dense (one entry per day of the trailing window,
zero days included) and grouped into Sunday-first weeks.
"""

from datetime import date, timedelta

from insights.services.github.constants import (
    CONTRIBUTION_LEVEL_THRESHOLDS,
    CONTRIBUTION_WINDOW_DAYS,
)
from insights.services.github.events import GitHubEvent, PushEvent
from insights.services.github.types import (
    ContributionCalendar,
    ContributionData,
    ContributionDay,
    ContributionWeek,
)

SUNDAY = 6  # date.weekday()


def contribution_level(count: int) -> int:
    """Bucket a day's count into a 0-4 intensity level."""
    if count <= 0:
        return 0
    for level, upper_bound in enumerate(CONTRIBUTION_LEVEL_THRESHOLDS, start=1):
        if count <= upper_bound:
            return level
    return len(CONTRIBUTION_LEVEL_THRESHOLDS) + 1


def count_contributions(
    events: list[GitHubEvent],
    today: date,
    window_days: int = CONTRIBUTION_WINDOW_DAYS,
) -> dict[date, int]:
    """
    Count pushed commits per day over the window ending on `today`.

    Every day of the window is present (zero when there was no push);
    pushes outside the window are ignored.
    """
    start = today - timedelta(days=window_days - 1)
    counts = {start + timedelta(days=offset): 0 for offset in range(window_days)}

    for event in events:
        if not isinstance(event, PushEvent) or not event.created_at:
            continue
        day = event.day
        if day in counts:
            counts[day] += event.commit_count

    return counts


def build_contribution_days(counts: dict[date, int]) -> list[ContributionDay]:
    return [
        ContributionDay(date=day, count=count, level=contribution_level(count))
        for day, count in sorted(counts.items())
    ]


def _week(days: list[ContributionDay]) -> ContributionWeek:
    return ContributionWeek(contribution_days=tuple(days), first_day=days[0].date)


def group_into_weeks(days: list[ContributionDay]) -> list[ContributionWeek]:
    """Split chronologically sorted days into Sunday-first weeks."""
    weeks: list[ContributionWeek] = []
    current: list[ContributionDay] = []

    for day in days:
        if day.date.weekday() == SUNDAY and current:
            weeks.append(_week(current))
            current = []
        current.append(day)

    if current:
        weeks.append(_week(current))

    return weeks


def longest_streak(days: list[ContributionDay]) -> int:
    """Longest run of consecutive calendar days with contributions."""
    longest = 0
    run = 0
    previous: date | None = None

    for day in sorted((d for d in days if d.count > 0), key=lambda d: d.date):
        if previous is not None and day.date - previous == timedelta(days=1):
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        previous = day.date

    return longest


def current_streak(days: list[ContributionDay], today: date) -> int:
    """Consecutive days with contributions, counting back from today."""
    counts = {day.date: day.count for day in days}
    streak = 0
    cursor = today

    while counts.get(cursor, 0) > 0:
        streak += 1
        cursor -= timedelta(days=1)

    return streak


def build_contribution_data(events: list[GitHubEvent], today: date) -> ContributionData:
    days = build_contribution_days(count_contributions(events, today))
    weeks = tuple(group_into_weeks(days))
    total = sum(day.count for day in days)

    return ContributionData(
        total_contributions=total,
        weeks=weeks,
        contribution_calendar=ContributionCalendar(total_contributions=total, weeks=weeks),
        longest_streak=longest_streak(days),
        current_streak=current_streak(days, today),
    )
