import logging
from datetime import date
from sqlalchemy import func
from models import db, Streak, StreakLog, STREAK_STATUSES, STREAK_TYPES
from services.errors import ValidationError
from services.habit_service import parse_bool

logger = logging.getLogger(__name__)


def recompute(streak):
    """Rebuild the streak counters from its logs.

    The current streak is the number of FOLLOWED days strictly after the latest
    BROKEN day. Untracked and SKIP days neither extend nor break it, so the result
    only depends on which logs exist, not on the order they were written in.
    """
    db.session.flush()

    last_broken = (db.session.query(func.max(StreakLog.date))
                   .filter(StreakLog.streak_id == streak.id, StreakLog.status == 'BROKEN')
                   .scalar())

    followed = StreakLog.query.filter_by(streak_id=streak.id, status='FOLLOWED')
    if last_broken is not None:
        followed = followed.filter(StreakLog.date > last_broken)

    streak.current_streak = followed.count()
    streak.last_broken_date = last_broken
    # The record never goes down, even if a FOLLOWED day is later corrected
    if streak.current_streak > (streak.highest_streak or 0):
        streak.highest_streak = streak.current_streak
    return streak


def record_status(streak, day, status):
    if status not in STREAK_STATUSES:
        raise ValidationError('Invalid status')

    log = StreakLog.query.filter_by(streak_id=streak.id, date=day).first()
    if log:
        log.status = status
    else:
        log = StreakLog(streak_id=streak.id, date=day, status=status)
        db.session.add(log)

    recompute(streak)
    db.session.commit()
    logger.info("Streak %s marked %s on %s: current=%d highest=%d",
                streak.id, status, day, streak.current_streak, streak.highest_streak)
    return log, streak


def clear_status(streak, day):
    log = StreakLog.query.filter_by(streak_id=streak.id, date=day).first()
    if log:
        db.session.delete(log)
    recompute(streak)
    db.session.commit()
    logger.info("Streak %s cleared on %s: current=%d", streak.id, day, streak.current_streak)
    return streak


def logs_for_day(user, day):
    return (StreakLog.query.join(Streak)
            .filter(Streak.user_id == user.id, StreakLog.date == day)
            .all())


def logs_for_streak(streak):
    return StreakLog.query.filter_by(streak_id=streak.id).order_by(StreakLog.date.asc()).all()


def status_map(user, day):
    return {log.streak_id: log.status for log in logs_for_day(user, day)}


def apply_streak_fields(streak, data, partial=False):
    if not partial or 'name' in data:
        name = (data.get('name') or '').strip()
        if not name:
            raise ValidationError('Name is required')
        streak.name = name

    if 'description' in data:
        streak.description = (data.get('description') or '').strip() or None

    if not partial or 'type' in data:
        streak_type = (data.get('type') or 'AVOID').upper()
        if streak_type not in STREAK_TYPES:
            raise ValidationError('Invalid streak type')
        streak.type = streak_type

    if 'isActive' in data:
        streak.is_active = parse_bool(data.get('isActive'))
    elif not partial:
        streak.is_active = True
    return streak


def create_streak(user, data):
    streak = Streak(user_id=user.id, current_streak=0, highest_streak=0, start_date=date.today())
    apply_streak_fields(streak, data)
    db.session.add(streak)
    db.session.commit()
    logger.info("Created streak %s for user %s", streak.id, user.id)
    return streak


def update_streak(streak, data):
    apply_streak_fields(streak, data, partial=True)
    db.session.commit()
    return streak


def delete_streak(streak):
    streak_id = streak.id
    db.session.delete(streak)
    db.session.commit()
    logger.info("Deleted streak %s", streak_id)
