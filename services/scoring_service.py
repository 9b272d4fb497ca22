import logging
from models import db, Habit, DayLog, HabitEntry, HABIT_STATUSES, UNTRACKED
from services.errors import ValidationError

logger = logging.getLogger(__name__)


def score_for(habit, status):
    if status == 'COMPLETED':
        return habit.points or 0
    if status == 'MISSED':
        return habit.missed_points or 0
    # SKIPPED and UNTRACKED are worth nothing
    return 0


def recalculate_score(day_log):
    total = sum(score_for(entry.habit, entry.status) for entry in day_log.entries if entry.habit is not None)
    day_log.total_score = total
    return total


def get_day(user, day):
    return DayLog.query.filter_by(user_id=user.id, date=day).first()


def _get_or_create_day(user, day):
    day_log = get_day(user, day)
    if day_log is None:
        day_log = DayLog(user_id=user.id, date=day, total_score=0)
        db.session.add(day_log)
    return day_log


def _check_status(status):
    if status not in HABIT_STATUSES and status != UNTRACKED:
        raise ValidationError('Invalid status')


def _apply_status(day_log, habit, status):
    entry = next((e for e in day_log.entries if e.habit_id == habit.id), None)
    if status == UNTRACKED:
        if entry is not None:
            day_log.entries.remove(entry)
        return
    if entry is None:
        day_log.entries.append(HabitEntry(habit=habit, habit_id=habit.id, status=status))
    else:
        entry.status = status


def save_day(user, day, entries):
    """Replace every entry of ``day`` with ``entries`` and recompute its score.

    ``entries`` is a list of ``{"habitId": ..., "status": ...}`` dicts. Habits left out
    of the list (or sent as UNTRACKED) lose their entry for that day.
    """
    if not isinstance(entries, list):
        raise ValidationError('Entries must be a list')

    habits = {h.id: h for h in Habit.query.filter_by(user_id=user.id).all()}

    statuses = {}
    for raw in entries:
        if not isinstance(raw, dict):
            raise ValidationError('Invalid entry')
        try:
            habit_id = int(raw.get('habitId', raw.get('habit_id')))
        except (TypeError, ValueError):
            raise ValidationError('Invalid habit id')
        if habit_id not in habits:
            raise ValidationError('Unknown habit')
        status = raw.get('status')
        _check_status(status)
        # Last one wins when a habit shows up twice
        statuses[habit_id] = status

    day_log = _get_or_create_day(user, day)
    for entry in list(day_log.entries):
        if entry.habit_id not in statuses:
            day_log.entries.remove(entry)
    for habit_id, status in statuses.items():
        _apply_status(day_log, habits[habit_id], status)

    recalculate_score(day_log)
    db.session.commit()
    logger.info("Saved day %s for user %s: %d entries, score %d",
                day, user.id, len(day_log.entries), day_log.total_score)
    return day_log


def set_habit_status(user, day, habit, status):
    _check_status(status)
    day_log = get_day(user, day)
    if day_log is None:
        if status == UNTRACKED:
            return None
        day_log = _get_or_create_day(user, day)

    _apply_status(day_log, habit, status)
    recalculate_score(day_log)
    db.session.commit()
    logger.info("Habit %s marked %s on %s, day score %d", habit.id, status, day, day_log.total_score)
    return day_log


def history(user):
    return DayLog.query.filter_by(user_id=user.id).order_by(DayLog.date.asc()).all()


def scores_between(user, start, end):
    rows = (db.session.query(DayLog.date, DayLog.total_score)
            .filter(DayLog.user_id == user.id, DayLog.date >= start, DayLog.date <= end)
            .all())
    return {d: score for d, score in rows}


def summary(scores):
    scores = list(scores)
    return {
        'positive_days': sum(1 for s in scores if s > 0),
        'negative_days': sum(1 for s in scores if s < 0),
        'neutral_days': sum(1 for s in scores if s == 0),
        'total_score': sum(scores),
    }
