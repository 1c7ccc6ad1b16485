"""Relative date periods used by date filters."""

import calendar
from datetime import datetime, timedelta

from payreport.domain.enums import DateUnit

FIXED_UNITS: dict[DateUnit, timedelta] = {
    DateUnit.MINUTE: timedelta(minutes=1),
    DateUnit.HOUR: timedelta(hours=1),
    DateUnit.DAY: timedelta(days=1),
    DateUnit.WEEK: timedelta(weeks=1),
}


def _shift_months(moment: datetime, months: int) -> datetime:
    index = moment.month - 1 + months
    year = moment.year + index // 12
    month = index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def shift(moment: datetime, unit: DateUnit, count: int) -> datetime:
    """Move `count` units forward (negative: backward). Months clamp to the month's last day."""
    if unit == DateUnit.MONTH:
        return _shift_months(moment, count)
    if unit == DateUnit.YEAR:
        return _shift_months(moment, 12 * count)
    return moment + FIXED_UNITS[unit] * count


def start_of(moment: datetime, unit: DateUnit) -> datetime:
    """Start of the unit containing `moment`; weeks start on Monday."""
    moment = moment.replace(second=0, microsecond=0)
    if unit == DateUnit.MINUTE:
        return moment
    moment = moment.replace(minute=0)
    if unit == DateUnit.HOUR:
        return moment
    moment = moment.replace(hour=0)
    if unit == DateUnit.DAY:
        return moment
    if unit == DateUnit.WEEK:
        return moment - timedelta(days=moment.weekday())
    moment = moment.replace(day=1)
    if unit == DateUnit.MONTH:
        return moment
    return moment.replace(month=1)


def previous_period(count: int, unit: DateUnit, now: datetime) -> tuple[int, int]:
    """Half-open epoch bounds of the `count` complete units before the current one."""
    end = start_of(now, unit)
    return int(shift(end, unit, -count).timestamp()), int(end.timestamp())


def next_period(count: int, unit: DateUnit, now: datetime) -> tuple[int, int]:
    """Half-open epoch bounds of the `count` complete units after the current one."""
    start = shift(start_of(now, unit), unit, 1)
    return int(start.timestamp()), int(shift(start, unit, count).timestamp())


def current_period(unit: DateUnit, now: datetime) -> tuple[int, int]:
    """Half-open epoch bounds [start, end) of the unit containing now."""
    start = start_of(now, unit)
    return int(start.timestamp()), int(shift(start, unit, 1).timestamp())
