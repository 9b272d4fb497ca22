from flask import render_template, request, redirect, url_for, abort
from flask_login import login_required, current_user
from datetime import date
from . import main_bp
from models import Habit, Streak, UNTRACKED
from services.errors import ValidationError
from services.habit_service import active_habits
from services.scoring_service import get_day, set_habit_status
from services.streak_service import status_map, record_status, clear_status
from utils import parse_day, format_day, adjacent_days


def _parse_day_or_400(value, default=None):
    try:
        day = parse_day(value, default=default)
    except ValueError:
        abort(400)
    # The first and last representable days have no neighbour to link to
    if day is None or day in (date.min, date.max):
        abort(400)
    return day


def day_context(day):
    habits = active_habits(current_user)
    streaks = (Streak.query.filter_by(user_id=current_user.id, is_active=True)
               .order_by(Streak.created_at.asc(), Streak.id.asc()).all())
    day_log = get_day(current_user, day)
    prev_day, next_day = adjacent_days(day)

    return {
        'day': day,
        'day_str': format_day(day),
        'prev_day': format_day(prev_day),
        'next_day': format_day(next_day),
        'is_today': day == date.today(),
        'score': day_log.total_score if day_log else 0,
        'is_tracked': day_log is not None,
        'habits': habits,
        'habit_statuses': day_log.status_map() if day_log else {},
        'streaks': streaks,
        'streak_statuses': status_map(current_user, day),
    }


def _day_response(day):
    if request.headers.get('HX-Request'):
        return render_template('partials/day_panel.html', **day_context(day))
    return redirect(url_for('main.index', date=format_day(day)))


@main_bp.route('/')
@login_required
def index():
    day = _parse_day_or_400(request.args.get('date'), default=date.today())
    return render_template('dashboard.html', **day_context(day))


@main_bp.route('/day/<day_str>/habit/<int:habit_id>', methods=['POST'])
@login_required
def mark_habit(day_str, habit_id):
    day = _parse_day_or_400(day_str)
    habit = Habit.query.filter_by(id=habit_id, user_id=current_user.id).first_or_404()

    try:
        set_habit_status(current_user, day, habit, request.form.get('status', ''))
    except ValidationError as e:
        abort(400, description=e.message)

    return _day_response(day)


@main_bp.route('/day/<day_str>/streak/<int:streak_id>', methods=['POST'])
@login_required
def mark_streak(day_str, streak_id):
    day = _parse_day_or_400(day_str)
    streak = Streak.query.filter_by(id=streak_id, user_id=current_user.id).first_or_404()
    status = request.form.get('status', '')

    try:
        if status == UNTRACKED:
            clear_status(streak, day)
        else:
            record_status(streak, day, status)
    except ValidationError as e:
        abort(400, description=e.message)

    # The streaks page swaps a single card instead of the whole day panel
    if request.headers.get('HX-Request') and request.form.get('view') == 'card':
        return render_template('partials/streak_card.html', streak=streak,
                               status=status_map(current_user, day).get(streak.id, UNTRACKED),
                               day_str=format_day(day), compact=False, view='card')
    if request.form.get('view') == 'card':
        return redirect(url_for('streaks.streaks'))
    return _day_response(day)
