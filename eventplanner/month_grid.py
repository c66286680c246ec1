"""
Month calendar view model

render_month() lays a flat list of dated events out on a Sunday-first,
seven-column month grid. It is a pure function of its inputs; the home page
renders its result server-side and static/js/app.js repeats the same layout
in the browser when the visitor moves between months.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

MONTH_NAMES = list(calendar.month_name)[1:]
WEEKDAYS = ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat']


@dataclass
class DayCell:
    day: int
    iso: str
    is_today: bool = False
    events: List[dict] = field(default_factory=list)


@dataclass
class MonthView:
    year: int
    month: int
    label: str
    total_events: int
    leading_blanks: int
    days: List[DayCell]
    weekdays: List[str] = field(default_factory=lambda: list(WEEKDAYS))

    @property
    def cells(self) -> List[Optional[DayCell]]:
        """Blank cells (None) for the first-day offset, then one cell per day"""
        return [None] * self.leading_blanks + list(self.days)

    @property
    def weeks(self) -> List[List[Optional[DayCell]]]:
        cells = self.cells
        cells += [None] * (-len(cells) % 7)
        return [cells[i:i + 7] for i in range(0, len(cells), 7)]

    @property
    def previous_month(self) -> date:
        return shift_month(date(self.year, self.month, 1), -1)

    @property
    def next_month(self) -> date:
        return shift_month(date(self.year, self.month, 1), 1)


def month_start(value: date) -> date:
    return value.replace(day=1)


def shift_month(cursor: date, delta: int) -> date:
    """First day of the month delta months away from cursor"""
    index = cursor.year * 12 + (cursor.month - 1) + delta
    return date(index // 12, index % 12 + 1, 1)


def parse_month(value: Optional[str], default: date) -> date:
    """Parse a YYYY-MM query value, falling back to default's month"""
    if value:
        try:
            year, month = (int(part) for part in value.split('-', 1))
            # Prev/next links must stay representable
            if date.min.year < year < date.max.year:
                return date(year, month, 1)
        except ValueError:
            pass
    return month_start(default)


def bucket_events(events) -> Dict[str, List[dict]]:
    """Group events by their ISO date, keeping input order within each day"""
    buckets: Dict[str, List[dict]] = {}
    for event in events:
        event_date = event.get('event_date')
        if not event_date:
            continue
        buckets.setdefault(event_date, []).append(event)
    return buckets


def render_month(events, cursor: date, today: Optional[date] = None) -> MonthView:
    """Build the grid for the month containing cursor"""
    events = list(events)
    today = today or date.today()
    year, month = cursor.year, cursor.month
    first_weekday, days_in_month = calendar.monthrange(year, month)
    # calendar counts Monday as 0; the grid starts on Sunday
    leading_blanks = (first_weekday + 1) % 7

    buckets = bucket_events(events)
    days = []
    for day in range(1, days_in_month + 1):
        current = date(year, month, day)
        iso = current.isoformat()
        days.append(DayCell(day=day, iso=iso, is_today=current == today,
                            events=buckets.get(iso, [])))

    return MonthView(
        year=year,
        month=month,
        label=f"{MONTH_NAMES[month - 1]} {year}",
        total_events=len(events),
        leading_blanks=leading_blanks,
        days=days,
    )
