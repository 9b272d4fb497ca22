import logging
from flask import request, jsonify, abort
from flask_login import login_required, current_user
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from . import api_bp
from models import db, Habit, Streak
from services.errors import ValidationError
from services import habit_service, scoring_service, streak_service, data_service
from utils import parse_day

logger = logging.getLogger(__name__)


@api_bp.errorhandler(ValidationError)
def handle_validation_error(e):
    db.session.rollback()
    return jsonify({'error': e.message}), e.status_code


@api_bp.errorhandler(HTTPException)
def handle_http_error(e):
    return jsonify({'error': e.description}), e.code


@api_bp.errorhandler(SQLAlchemyError)
def handle_db_error(e):
    db.session.rollback()
    logger.exception("Database error on %s %s", request.method, request.path)
    return jsonify({'error': 'Database error'}), 500


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description='Invalid JSON')
    return data


def _day_arg(value):
    if not value:
        abort(400, description='Date is required')
    try:
        return parse_day(value)
    except ValueError:
        abort(400, description='Invalid date')


def _owned_habit(habit_id):
    habit = Habit.query.filter_by(id=habit_id, user_id=current_user.id).first()
    if habit is None:
        abort(404, description='Habit not found')
    return habit


def _owned_streak(streak_id):
    if isinstance(streak_id, bool):
        abort(400, description='Invalid streak id')
    try:
        streak_id = int(streak_id)
    except (TypeError, ValueError):
        abort(400, description='Invalid streak id')
    streak = Streak.query.filter_by(id=streak_id, user_id=current_user.id).first()
    if streak is None:
        abort(404, description='Streak not found')
    return streak


# Habits

@api_bp.route('/habits', methods=['GET'])
@login_required
def list_habits():
    habits = Habit.query.filter_by(user_id=current_user.id).order_by(Habit.created_at.asc(), Habit.id.asc()).all()
    return jsonify([h.to_dict() for h in habits])


@api_bp.route('/habits', methods=['POST'])
@login_required
def create_habit():
    habit = habit_service.create_habit(current_user, _json_body())
    return jsonify(habit.to_dict())


@api_bp.route('/habits/<int:habit_id>', methods=['PUT'])
@login_required
def update_habit(habit_id):
    habit = _owned_habit(habit_id)
    habit_service.update_habit(habit, _json_body())
    return jsonify(habit.to_dict())


@api_bp.route('/habits/<int:habit_id>', methods=['DELETE'])
@login_required
def delete_habit(habit_id):
    habit_service.delete_habit(_owned_habit(habit_id))
    return jsonify({'success': True})


# Day logs

@api_bp.route('/days', methods=['GET'])
@login_required
def get_day():
    day = _day_arg(request.args.get('date'))
    day_log = scoring_service.get_day(current_user, day)
    if day_log is None:
        # Untracked day, the client renders every habit as UNTRACKED
        return jsonify(None)
    return jsonify(day_log.to_dict())


@api_bp.route('/days', methods=['POST'])
@login_required
def save_day():
    data = _json_body()
    day = _day_arg(data.get('date'))
    day_log = scoring_service.save_day(current_user, day, data.get('entries'))
    return jsonify(day_log.to_dict())


@api_bp.route('/history', methods=['GET'])
@login_required
def history():
    return jsonify([
        {'date': d.date.isoformat(), 'totalScore': d.total_score}
        for d in scoring_service.history(current_user)
    ])


# Streaks

@api_bp.route('/streaks', methods=['GET'])
@login_required
def list_streaks():
    streaks = Streak.query.filter_by(user_id=current_user.id).order_by(Streak.created_at.asc(), Streak.id.asc()).all()
    return jsonify([s.to_dict() for s in streaks])


@api_bp.route('/streaks', methods=['POST'])
@login_required
def create_streak():
    streak = streak_service.create_streak(current_user, _json_body())
    return jsonify(streak.to_dict())


@api_bp.route('/streaks/<int:streak_id>', methods=['PUT'])
@login_required
def update_streak(streak_id):
    streak = _owned_streak(streak_id)
    streak_service.update_streak(streak, _json_body())
    return jsonify(streak.to_dict())


@api_bp.route('/streaks/<int:streak_id>', methods=['DELETE'])
@login_required
def delete_streak(streak_id):
    streak_service.delete_streak(_owned_streak(streak_id))
    return jsonify({'success': True})


@api_bp.route('/streaks/log', methods=['POST'])
@login_required
def log_streak():
    data = _json_body()
    streak_id = data.get('streakId')
    date_str = data.get('date')
    status = data.get('status')

    if not streak_id or not date_str or not status:
        return jsonify({'error': 'Missing required fields'}), 400

    day = _day_arg(date_str)
    streak = _owned_streak(streak_id)
    log, streak = streak_service.record_status(streak, day, status)
    return jsonify({'log': log.to_dict(), 'streak': streak.to_dict()})


@api_bp.route('/streaks/log', methods=['DELETE'])
@login_required
def clear_streak_log():
    data = _json_body()
    if not data.get('streakId') or not data.get('date'):
        return jsonify({'error': 'Missing required fields'}), 400

    day = _day_arg(data.get('date'))
    streak = streak_service.clear_status(_owned_streak(data.get('streakId')), day)
    return jsonify({'streak': streak.to_dict()})


@api_bp.route('/streaks/log', methods=['GET'])
@login_required
def get_streak_logs():
    date_str = request.args.get('date')
    streak_id = request.args.get('streakId')

    if date_str:
        logs = streak_service.logs_for_day(current_user, _day_arg(date_str))
        return jsonify([l.to_dict() for l in logs])
    if streak_id:
        logs = streak_service.logs_for_streak(_owned_streak(streak_id))
        return jsonify([l.to_dict() for l in logs])
    return jsonify([])


# Settings

@api_bp.route('/settings/reset', methods=['POST'])
@login_required
def reset():
    data_service.reset_day_logs(current_user)
    return jsonify({'success': True})


@api_bp.route('/export', methods=['GET'])
@login_required
def export():
    return jsonify(data_service.export_user_data(current_user))
