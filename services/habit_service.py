import logging
from models import db, Habit, HABIT_CATEGORIES
from services.errors import ValidationError

logger = logging.getLogger(__name__)

# Form and JSON field names -> model attributes
POINT_FIELDS = (('points', 'points'), ('missedPoints', 'missed_points'))


def parse_bool(value):
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in ('1', 'true', 'on', 'yes')


def _parse_int(value, field):
    if value is None or value == '':
        return 0
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be a whole number')
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(f'{field} must be a whole number')


def apply_habit_fields(habit, data, partial=False):
    if not partial or 'name' in data:
        name = (data.get('name') or '').strip()
        if not name:
            raise ValidationError('Name is required')
        habit.name = name

    if 'description' in data:
        habit.description = (data.get('description') or '').strip() or None

    if not partial or 'category' in data:
        category = (data.get('category') or 'GOOD').upper()
        if category not in HABIT_CATEGORIES:
            raise ValidationError('Invalid category')
        habit.category = category

    for field, attr in POINT_FIELDS:
        if not partial or field in data:
            setattr(habit, attr, _parse_int(data.get(field), field))

    if 'isActive' in data:
        habit.is_active = parse_bool(data.get('isActive'))
    elif not partial:
        habit.is_active = True
    return habit


def create_habit(user, data):
    habit = Habit(user_id=user.id)
    apply_habit_fields(habit, data)
    db.session.add(habit)
    db.session.commit()
    logger.info("Created habit %s for user %s", habit.id, user.id)
    return habit


def update_habit(habit, data):
    apply_habit_fields(habit, data, partial=True)
    db.session.commit()
    return habit


def delete_habit(habit):
    # Entries go with the habit; existing day scores are left as recorded
    habit_id = habit.id
    db.session.delete(habit)
    db.session.commit()
    logger.info("Deleted habit %s", habit_id)


def active_habits(user):
    return (Habit.query.filter_by(user_id=user.id, is_active=True)
            .order_by(Habit.created_at.asc(), Habit.id.asc()).all())
