import logging
from datetime import datetime
from models import db, Habit, DayLog, HabitEntry, Streak, StreakLog

logger = logging.getLogger(__name__)


def reset_day_logs(user):
    """Delete every day log (and its entries) for ``user``. Habits and streaks are kept."""
    day_ids = db.select(DayLog.id).where(DayLog.user_id == user.id)
    HabitEntry.query.filter(HabitEntry.day_log_id.in_(day_ids)).delete(synchronize_session=False)
    deleted = DayLog.query.filter_by(user_id=user.id).delete(synchronize_session=False)
    db.session.commit()
    logger.info("Reset %d day logs for user %s", deleted, user.id)
    return deleted


def export_user_data(user):
    habits = Habit.query.filter_by(user_id=user.id).order_by(Habit.created_at.asc()).all()
    streaks = Streak.query.filter_by(user_id=user.id).order_by(Streak.created_at.asc()).all()
    days = DayLog.query.filter_by(user_id=user.id).order_by(DayLog.date.asc()).all()
    streak_logs = (StreakLog.query.join(Streak)
                   .filter(Streak.user_id == user.id)
                   .order_by(StreakLog.date.asc(), StreakLog.streak_id.asc())
                   .all())

    return {
        'exportedAt': datetime.utcnow().isoformat(),
        'username': user.username,
        'habits': [h.to_dict() for h in habits],
        'streaks': [s.to_dict() for s in streaks],
        'days': [d.to_dict() for d in days],
        'streakLogs': [l.to_dict() for l in streak_logs],
    }
