from flask_sqlalchemy import SQLAlchemy
from flask_login import UserMixin
from datetime import datetime, date

db = SQLAlchemy()

HABIT_CATEGORIES = ('GOOD', 'BAD')
HABIT_STATUSES = ('COMPLETED', 'MISSED', 'SKIPPED')
STREAK_TYPES = ('AVOID', 'MAINTAIN')
STREAK_STATUSES = ('FOLLOWED', 'BROKEN', 'SKIP')
UNTRACKED = 'UNTRACKED'


def _iso(value):
    return value.isoformat() if value else None


class User(UserMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(150), unique=True, nullable=False)
    password_hash = db.Column(db.String(200), nullable=False)
    date_joined = db.Column(db.DateTime, default=datetime.utcnow)

    habits = db.relationship('Habit', backref='user', lazy=True, cascade="all, delete-orphan",
                             order_by="Habit.created_at")
    streaks = db.relationship('Streak', backref='user', lazy=True, cascade="all, delete-orphan",
                              order_by="Streak.created_at")
    day_logs = db.relationship('DayLog', backref='user', lazy=True, cascade="all, delete-orphan")


class Habit(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    category = db.Column(db.String(10), nullable=False, default='GOOD') # GOOD, BAD
    # Points are signed: a BAD habit usually carries negative points and positive missed_points
    points = db.Column(db.Integer, nullable=False, default=0)
    missed_points = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)

    entries = db.relationship('HabitEntry', backref='habit', lazy=True, cascade="all, delete-orphan")

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'category': self.category,
            'points': self.points,
            'missedPoints': self.missed_points,
            'isActive': self.is_active,
            'createdAt': _iso(self.created_at),
        }


class DayLog(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False)
    total_score = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)

    entries = db.relationship('HabitEntry', backref='day_log', lazy=True, cascade="all, delete-orphan")

    __table_args__ = (db.UniqueConstraint('user_id', 'date', name='_user_day_uc'),)

    def status_map(self):
        return {e.habit_id: e.status for e in self.entries}

    def to_dict(self):
        return {
            'id': self.id,
            'date': self.date.isoformat(),
            'totalScore': self.total_score,
            'entries': [e.to_dict() for e in self.entries],
        }


class HabitEntry(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    day_log_id = db.Column(db.Integer, db.ForeignKey('day_log.id'), nullable=False, index=True)
    habit_id = db.Column(db.Integer, db.ForeignKey('habit.id'), nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False) # COMPLETED, MISSED, SKIPPED

    __table_args__ = (db.UniqueConstraint('day_log_id', 'habit_id', name='_day_habit_uc'),)

    def to_dict(self):
        return {'habitId': self.habit_id, 'status': self.status}


class Streak(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    type = db.Column(db.String(10), nullable=False, default='AVOID') # AVOID, MAINTAIN
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    current_streak = db.Column(db.Integer, nullable=False, default=0)
    highest_streak = db.Column(db.Integer, nullable=False, default=0)
    last_broken_date = db.Column(db.Date, nullable=True)
    start_date = db.Column(db.Date, default=date.today)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)

    logs = db.relationship('StreakLog', backref='streak', lazy=True, cascade="all, delete-orphan",
                           order_by="StreakLog.date")

    @property
    def best(self):
        return max(self.highest_streak or 0, self.current_streak or 0)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'type': self.type,
            'isActive': self.is_active,
            'currentStreak': self.current_streak,
            'highestStreak': self.highest_streak,
            'lastBrokenDate': _iso(self.last_broken_date),
            'startDate': _iso(self.start_date),
            'createdAt': _iso(self.created_at),
        }


class StreakLog(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    streak_id = db.Column(db.Integer, db.ForeignKey('streak.id'), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(20), nullable=False) # FOLLOWED, BROKEN, SKIP

    __table_args__ = (db.UniqueConstraint('streak_id', 'date', name='_streak_date_uc'),)

    def to_dict(self):
        return {
            'id': self.id,
            'streakId': self.streak_id,
            'date': self.date.isoformat(),
            'status': self.status,
        }
