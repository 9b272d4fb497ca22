import calendar
from datetime import datetime, date, timedelta

DATE_FORMAT = '%Y-%m-%d'


def parse_day(value, default=None):
    """Parse a YYYY-MM-DD string (or the date part of an ISO timestamp) into a date.

    Returns ``default`` when value is empty and raises ValueError when it can't be read.
    """
    if value is None or value == '':
        return default
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value).strip()[:10], DATE_FORMAT).date()


def format_day(value):
    return value.strftime(DATE_FORMAT)


def format_points(value):
    if not value:
        return "0"
    value = int(value)
    if value > 0:
        return f"+{value}"
    return str(value)


def score_tone(score):
    if score is None:
        return 'empty'
    if score > 0:
        return 'positive'
    if score < 0:
        return 'negative'
    return 'neutral'


def wrap_month(year, month):
    if month > 12:
        month = 1
        year += 1
    elif month < 1:
        month = 12
        year -= 1
    return year, month


def month_grid(year, month, scores):
    # Sunday-first weeks; days outside the month are None
    cal = calendar.Calendar(firstweekday=calendar.SUNDAY)
    weeks = []
    for week in cal.monthdatescalendar(year, month):
        row = []
        for d in week:
            if d.month != month:
                row.append(None)
                continue
            score = scores.get(d)
            row.append({
                'date': d,
                'day': d.day,
                'score': score,
                'tone': score_tone(score),
            })
        weeks.append(row)
    return weeks


def adjacent_days(day):
    return day - timedelta(days=1), day + timedelta(days=1)
