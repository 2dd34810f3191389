"""Due date resolution for spoken task descriptions.

Resolution runs in two phases over lowercase text:

1. Date phase: the first matching rule in DATE_RULES picks a calendar day
   relative to ``now``. If none match, a numeric ``M/D[/Y]`` date is tried.
2. Time phase: only when a date was found. The first matching rule in
   TIME_RULES picks the time of day; otherwise 17:00 is used.

All patterns are unanchored and checked in declaration order, so earlier rules
shadow later ones ("tomorrow" fires before "day after tomorrow", "night"
before "midnight").
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

logger = logging.getLogger(__name__)

# Sunday first, matching the weekday index used for "by/next/this <weekday>"
WEEKDAYS = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")
_WEEKDAY_ALTERNATION = "|".join(WEEKDAYS)

END_OF_DAY_HOUR = 17

NUMERIC_DATE_PATTERN = re.compile(r"([0-9]{1,2})[/\-]([0-9]{1,2})(?:[/\-]([0-9]{2,4}))?")


@dataclass(frozen=True)
class DateRule:
    """A date phrase and how to turn it into a day relative to now."""

    name: str
    pattern: re.Pattern[str]
    resolve: Callable[[re.Match[str], datetime], datetime]


@dataclass(frozen=True)
class TimeRule:
    """A time-of-day phrase and the (hour, minute) it stands for."""

    name: str
    pattern: re.Pattern[str]
    resolve: Callable[[re.Match[str]], tuple[int, int]]


def weekday_index(moment: datetime) -> int:
    """Day of week with Sunday=0 through Saturday=6."""
    return moment.isoweekday() % 7


def days_until_weekday(name: str, now: datetime, *, force_next_week: bool = False) -> int:
    """Days from now to the named weekday.

    A weekday that is today or already past this week wraps to next week.
    With force_next_week the week is skipped even for days still ahead.
    """
    delta = WEEKDAYS.index(name) - weekday_index(now)
    if delta <= 0 or force_next_week:
        delta += 7
    return delta


def _fixed_offset(days: int) -> Callable[[re.Match[str], datetime], datetime]:
    def resolve(match: re.Match[str], now: datetime) -> datetime:
        return now + timedelta(days=days)

    return resolve


def _counted_offset(multiplier: int) -> Callable[[re.Match[str], datetime], datetime]:
    def resolve(match: re.Match[str], now: datetime) -> datetime:
        return now + timedelta(days=int(match.group(1)) * multiplier)

    return resolve


def _weekday(*, force_next_week: bool = False) -> Callable[[re.Match[str], datetime], datetime]:
    def resolve(match: re.Match[str], now: datetime) -> datetime:
        delta = days_until_weekday(match.group(1), now, force_next_week=force_next_week)
        return now + timedelta(days=delta)

    return resolve


DATE_RULES: tuple[DateRule, ...] = (
    DateRule("today", re.compile(r"today"), _fixed_offset(0)),
    DateRule("tomorrow", re.compile(r"tomorrow"), _fixed_offset(1)),
    DateRule("day_after_tomorrow", re.compile(r"day after tomorrow"), _fixed_offset(2)),
    DateRule("next_week", re.compile(r"next week"), _fixed_offset(7)),
    DateRule("in_days", re.compile(r"in ([0-9]+) days?"), _counted_offset(1)),
    DateRule("in_weeks", re.compile(r"in ([0-9]+) weeks?"), _counted_offset(7)),
    DateRule("by_weekday", re.compile(rf"by ({_WEEKDAY_ALTERNATION})"), _weekday()),
    DateRule(
        "next_weekday",
        re.compile(rf"next ({_WEEKDAY_ALTERNATION})"),
        _weekday(force_next_week=True),
    ),
    DateRule("this_weekday", re.compile(rf"this ({_WEEKDAY_ALTERNATION})"), _weekday()),
)


def to_24_hour(hour: int, suffix: str | None) -> int:
    if suffix == "pm" and hour < 12:
        return hour + 12
    if suffix == "am" and hour == 12:
        return 0
    return hour


def _clock_with_minutes(match: re.Match[str]) -> tuple[int, int]:
    return to_24_hour(int(match.group(1)), match.group(3)), int(match.group(2))


def _clock_hour_only(match: re.Match[str]) -> tuple[int, int]:
    return to_24_hour(int(match.group(1)), match.group(2)), 0


def _named(hour: int) -> Callable[[re.Match[str]], tuple[int, int]]:
    def resolve(match: re.Match[str]) -> tuple[int, int]:
        return hour, 0

    return resolve


TIME_RULES: tuple[TimeRule, ...] = (
    TimeRule(
        "clock_minutes",
        re.compile(r"([0-9]{1,2}):([0-9]{2})\s*(am|pm)"),
        _clock_with_minutes,
    ),
    TimeRule("clock_hour", re.compile(r"([0-9]{1,2})\s*(am|pm)"), _clock_hour_only),
    TimeRule("morning", re.compile(r"morning"), _named(9)),
    TimeRule("afternoon", re.compile(r"afternoon"), _named(14)),
    TimeRule("evening", re.compile(r"evening"), _named(18)),
    TimeRule("night", re.compile(r"night"), _named(21)),
    TimeRule("noon", re.compile(r"noon"), _named(12)),
    TimeRule("midnight", re.compile(r"midnight"), _named(0)),
    TimeRule("end_of_day", re.compile(r"end of day"), _named(END_OF_DAY_HOUR)),
    TimeRule("eod", re.compile(r"eod"), _named(END_OF_DAY_HOUR)),
)


def calendar_date(month: int, day: int, year: int, now: datetime) -> datetime:
    """Midnight of the given calendar date, rolling over out-of-range values.

    Month 13 becomes January of the next year and day 0 the last day of the
    previous month, so an impossible date still yields a timestamp.
    """
    carry, month_index = divmod(month - 1, 12)
    first = now.replace(
        year=year + carry,
        month=month_index + 1,
        day=1,
        hour=0,
        minute=0,
        second=0,
        microsecond=0,
    )
    return first + timedelta(days=day - 1)


class DateTimeResolver:
    """Resolves the due date and time mentioned in a transcript."""

    def __init__(
        self,
        date_rules: tuple[DateRule, ...] = DATE_RULES,
        time_rules: tuple[TimeRule, ...] = TIME_RULES,
    ):
        self.date_rules = date_rules
        self.time_rules = time_rules

    def resolve(self, text: str, now: datetime) -> datetime | None:
        """Resolve a due timestamp from lowercase text.

        Args:
            text: Lowercase transcript
            now: Reference time for relative phrases

        Returns:
            The due timestamp with seconds zeroed, or None if no date was
            mentioned or the date falls outside the representable range.
        """
        try:
            date = self.resolve_date(text, now)
            if date is None:
                return None
            hour, minute = self.resolve_time(text)
            return self._at_time(date, hour, minute)
        except (OverflowError, ValueError) as exc:
            logger.debug("Date out of range for %r: %s", text, exc)
            return None

    def resolve_date(self, text: str, now: datetime) -> datetime | None:
        for rule in self.date_rules:
            match = rule.pattern.search(text)
            if match:
                logger.debug("Date rule %s matched %r", rule.name, match.group(0))
                return rule.resolve(match, now)

        match = NUMERIC_DATE_PATTERN.search(text)
        if match:
            year = int(match.group(3)) if match.group(3) else now.year
            if year < 100:
                year += 2000
            logger.debug("Numeric date matched %r", match.group(0))
            return calendar_date(int(match.group(1)), int(match.group(2)), year, now)

        return None

    def resolve_time(self, text: str) -> tuple[int, int]:
        for rule in self.time_rules:
            match = rule.pattern.search(text)
            if match:
                logger.debug("Time rule %s matched %r", rule.name, match.group(0))
                return rule.resolve(match)
        return END_OF_DAY_HOUR, 0

    @staticmethod
    def _at_time(date: datetime, hour: int, minute: int) -> datetime:
        midnight = date.replace(hour=0, minute=0, second=0, microsecond=0)
        return midnight + timedelta(hours=hour, minutes=minute)


_resolver = DateTimeResolver()


def resolve_datetime(lower: str, now: datetime) -> datetime | None:
    return _resolver.resolve(lower, now)
