import pytest
from datetime import date, datetime
from utils import parse_day, format_points, score_tone, wrap_month, month_grid, adjacent_days

def test_parse_day():
    assert parse_day('2026-01-06') == date(2026, 1, 6)
    assert parse_day('2026-01-06T23:59:59.000Z') == date(2026, 1, 6)
    assert parse_day(datetime(2026, 1, 6, 12, 30)) == date(2026, 1, 6)
    assert parse_day('', default=date(2020, 1, 1)) == date(2020, 1, 1)
    assert parse_day(None) is None
    with pytest.raises(ValueError):
        parse_day('06/01/2026')

def test_format_points():
    assert format_points(10) == '+10'
    assert format_points(-5) == '-5'
    assert format_points(0) == '0'
    assert format_points(None) == '0'

def test_score_tone():
    assert score_tone(None) == 'empty'
    assert score_tone(3) == 'positive'
    assert score_tone(-1) == 'negative'
    assert score_tone(0) == 'neutral'

def test_wrap_month():
    assert wrap_month(2026, 13) == (2027, 1)
    assert wrap_month(2026, 0) == (2025, 12)
    assert wrap_month(2026, 6) == (2026, 6)

def test_month_grid_starts_on_sunday():
    # February 2026 starts on a Sunday and has exactly four weeks
    weeks = month_grid(2026, 2, {date(2026, 2, 3): -4})
    assert len(weeks) == 4
    assert weeks[0][0]['date'] == date(2026, 2, 1)
    assert weeks[0][2]['score'] == -4
    assert weeks[0][2]['tone'] == 'negative'
    assert weeks[0][1]['tone'] == 'empty'

def test_month_grid_pads_outside_days():
    # January 2026 starts on a Thursday
    weeks = month_grid(2026, 1, {})
    assert weeks[0][:4] == [None, None, None, None]
    assert weeks[0][4]['day'] == 1
    assert all(len(week) == 7 for week in weeks)

def test_adjacent_days():
    assert adjacent_days(date(2026, 3, 1)) == (date(2026, 2, 28), date(2026, 3, 2))
