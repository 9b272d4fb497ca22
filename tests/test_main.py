from models import db, User, Habit, DayLog, StreakLog
from datetime import date, timedelta

def test_dashboard_redirects_when_logged_out(client):
    response = client.get('/')
    assert response.status_code == 302
    assert '/login' in response.location

def test_dashboard_empty(auth_client):
    client, _ = auth_client
    response = client.get('/')
    assert response.status_code == 200
    assert b'Daily Score' in response.data
    assert b'No active habits yet' in response.data
    assert b'Today' in response.data

def test_dashboard_lists_active_habits_and_streaks(auth_client, make_habit, make_streak):
    client, user = auth_client
    make_habit(user, name='Morning Run')
    make_habit(user, name='Old Habit', is_active=False)
    make_streak(user, name='No Sugar')
    make_streak(user, name='Paused Streak', is_active=False)

    response = client.get('/?date=2026-01-06')
    assert response.status_code == 200
    assert b'Morning Run' in response.data
    assert b'Old Habit' not in response.data
    assert b'No Sugar' in response.data
    assert b'Paused Streak' not in response.data
    assert b'Active Streaks' in response.data
    assert b'2026-01-05' in response.data
    assert b'2026-01-07' in response.data

def test_dashboard_bad_date(auth_client):
    client, _ = auth_client
    assert client.get('/?date=not-a-date').status_code == 400

def test_mark_habit_htmx(auth_client, make_habit):
    client, user = auth_client
    habit = make_habit(user, points=10, missed_points=-5)

    response = client.post(f'/day/2026-01-06/habit/{habit.id}', data={'status': 'COMPLETED'},
                           headers={'HX-Request': 'true'})
    assert response.status_code == 200
    assert b'score-positive' in response.data
    assert b'+10' in response.data

    day_log = DayLog.query.filter_by(user_id=user.id, date=date(2026, 1, 6)).first()
    assert day_log.total_score == 10

    client.post(f'/day/2026-01-06/habit/{habit.id}', data={'status': 'MISSED'}, headers={'HX-Request': 'true'})
    db.session.refresh(day_log)
    assert day_log.total_score == -5

def test_mark_habit_toggle_off(auth_client, make_habit):
    client, user = auth_client
    habit = make_habit(user)

    client.post(f'/day/2026-01-06/habit/{habit.id}', data={'status': 'COMPLETED'})
    response = client.post(f'/day/2026-01-06/habit/{habit.id}', data={'status': 'UNTRACKED'})
    assert response.status_code == 302
    assert 'date=2026-01-06' in response.location

    day_log = DayLog.query.filter_by(user_id=user.id).first()
    assert day_log.entries == []
    assert day_log.total_score == 0

def test_mark_habit_errors(auth_client, make_habit):
    client, user = auth_client
    habit = make_habit(user)
    other = User(username='other', password_hash='hash')
    db.session.add(other)
    db.session.commit()
    foreign = make_habit(other)

    assert client.post(f'/day/2026-01-06/habit/{habit.id}', data={'status': 'DONE'}).status_code == 400
    assert client.post(f'/day/2026-13-06/habit/{habit.id}', data={'status': 'COMPLETED'}).status_code == 400
    assert client.post(f'/day/2026-01-06/habit/{foreign.id}', data={'status': 'COMPLETED'}).status_code == 404
    assert DayLog.query.count() == 0

def test_mark_streak_from_dashboard(auth_client, make_streak):
    client, user = auth_client
    streak = make_streak(user)
    today = date.today()

    for i in (2, 1, 0):
        d = (today - timedelta(days=i)).isoformat()
        client.post(f'/day/{d}/streak/{streak.id}', data={'status': 'FOLLOWED'}, headers={'HX-Request': 'true'})

    db.session.refresh(streak)
    assert streak.current_streak == 3

    response = client.post(f'/day/{today.isoformat()}/streak/{streak.id}', data={'status': 'UNTRACKED'},
                           headers={'HX-Request': 'true'})
    assert response.status_code == 200
    assert b'Daily Score' in response.data
    db.session.refresh(streak)
    assert streak.current_streak == 2

def test_mark_streak_card_view(auth_client, make_streak):
    client, user = auth_client
    streak = make_streak(user, name='Meditate', type='MAINTAIN')
    today = date.today().isoformat()

    response = client.post(f'/day/{today}/streak/{streak.id}', data={'status': 'BROKEN', 'view': 'card'},
                           headers={'HX-Request': 'true'})
    assert response.status_code == 200
    assert f'streak-card-{streak.id}'.encode() in response.data
    assert b'streak-status-broken' in response.data
    assert b'Daily Score' not in response.data
    assert StreakLog.query.filter_by(streak_id=streak.id).first().status == 'BROKEN'

def test_mark_streak_invalid_status(auth_client, make_streak):
    client, user = auth_client
    streak = make_streak(user)
    assert client.post(f'/day/2026-01-06/streak/{streak.id}', data={'status': 'MAYBE'}).status_code == 400

def test_dashboard_rejects_days_without_neighbours(auth_client, make_habit):
    client, user = auth_client
    habit = make_habit(user)
    assert client.get('/?date=9999-12-31').status_code == 400
    assert client.get('/?date=0001-01-01').status_code == 400
    assert client.get('/?date=9999-12-30').status_code == 200
    assert client.post(f'/day/9999-12-31/habit/{habit.id}', data={'status': 'COMPLETED'}).status_code == 400
    assert DayLog.query.count() == 0
