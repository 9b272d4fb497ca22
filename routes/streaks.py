from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required, current_user
from datetime import date
from . import streaks_bp
from models import db, Streak
from services.errors import ValidationError
from services.streak_service import create_streak, update_streak, delete_streak, status_map, logs_for_streak
from utils import format_day


def _owned(streak_id):
    return Streak.query.filter_by(id=streak_id, user_id=current_user.id).first_or_404()


@streaks_bp.route('/')
@login_required
def streaks():
    today = date.today()
    user_streaks = (Streak.query.filter_by(user_id=current_user.id)
                    .order_by(Streak.created_at.asc(), Streak.id.asc()).all())
    return render_template('streaks.html', streaks=user_streaks,
                           statuses=status_map(current_user, today), day_str=format_day(today))


@streaks_bp.route('/add', methods=['POST'])
@login_required
def add_streak():
    try:
        create_streak(current_user, request.form)
    except ValidationError as e:
        db.session.rollback()
        flash(e.message, 'error')
    return redirect(url_for('streaks.streaks'))


@streaks_bp.route('/<int:streak_id>')
@login_required
def streak_detail(streak_id):
    streak = _owned(streak_id)
    return render_template('streak_detail.html', streak=streak, logs=logs_for_streak(streak))


@streaks_bp.route('/<int:streak_id>/edit', methods=['GET'])
@login_required
def edit_streak(streak_id):
    return render_template('partials/streak_form.html', streak=_owned(streak_id))


@streaks_bp.route('/<int:streak_id>/update', methods=['POST'])
@login_required
def update_streak_view(streak_id):
    streak = _owned(streak_id)
    try:
        update_streak(streak, request.form)
    except ValidationError as e:
        db.session.rollback()
        flash(e.message, 'error')
    return redirect(url_for('streaks.streaks'))


@streaks_bp.route('/<int:streak_id>/toggle_active', methods=['POST'])
@login_required
def toggle_active(streak_id):
    streak = _owned(streak_id)
    update_streak(streak, {'isActive': not streak.is_active})
    return redirect(url_for('streaks.streaks'))


@streaks_bp.route('/<int:streak_id>/delete', methods=['POST'])
@login_required
def delete_streak_view(streak_id):
    delete_streak(_owned(streak_id))
    return redirect(url_for('streaks.streaks'))
