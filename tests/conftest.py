import os

os.environ.setdefault('SQLALCHEMY_DATABASE_URI', 'sqlite:///:memory:')
os.environ.setdefault('SECRET_KEY', 'test-secret')

import pytest
from app import app
from models import db, User, Habit, Streak
from werkzeug.security import generate_password_hash

@pytest.fixture
def client():
    app.config['TESTING'] = True
    app.config['WTF_CSRF_ENABLED'] = False # Disable CSRF for easier testing

    with app.test_client() as client:
        with app.app_context():
            db.create_all()
            yield client
            db.session.remove()
            db.drop_all()

@pytest.fixture
def auth_client(client):
    user = User(username='testuser', password_hash=generate_password_hash('password', method='scrypt'))
    db.session.add(user)
    db.session.commit()

    client.post('/login', data={'username': 'testuser', 'password': 'password'})
    return client, user

@pytest.fixture
def make_habit():
    def _make(user, name='Run', category='GOOD', points=10, missed_points=-5, is_active=True):
        habit = Habit(name=name, category=category, points=points, missed_points=missed_points,
                      is_active=is_active, user_id=user.id)
        db.session.add(habit)
        db.session.commit()
        return habit
    return _make

@pytest.fixture
def make_streak():
    def _make(user, name='No Sugar', type='AVOID', is_active=True):
        streak = Streak(name=name, type=type, is_active=is_active, user_id=user.id)
        db.session.add(streak)
        db.session.commit()
        return streak
    return _make
