from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required, current_user
from . import habits_bp
from models import db, Habit
from services.errors import ValidationError
from services.habit_service import create_habit, update_habit, delete_habit


def _owned(habit_id):
    return Habit.query.filter_by(id=habit_id, user_id=current_user.id).first_or_404()


@habits_bp.route('/')
@login_required
def habits():
    user_habits = (Habit.query.filter_by(user_id=current_user.id)
                   .order_by(Habit.created_at.asc(), Habit.id.asc()).all())
    return render_template('habits.html', habits=user_habits)


@habits_bp.route('/add', methods=['POST'])
@login_required
def add_habit():
    try:
        create_habit(current_user, request.form)
    except ValidationError as e:
        db.session.rollback()
        flash(e.message, 'error')
    return redirect(url_for('habits.habits'))


@habits_bp.route('/<int:habit_id>/edit', methods=['GET'])
@login_required
def edit_habit(habit_id):
    return render_template('partials/habit_form.html', habit=_owned(habit_id))


@habits_bp.route('/<int:habit_id>/item', methods=['GET'])
@login_required
def get_habit_item(habit_id):
    return render_template('partials/habit_item.html', habit=_owned(habit_id))


@habits_bp.route('/<int:habit_id>/update', methods=['POST'])
@login_required
def update_habit_view(habit_id):
    habit = _owned(habit_id)
    try:
        update_habit(habit, request.form)
    except ValidationError as e:
        db.session.rollback()
        if request.headers.get('HX-Request'):
            return render_template('partials/habit_form.html', habit=habit, error=e.message)
        flash(e.message, 'error')

    if request.headers.get('HX-Request'):
        return render_template('partials/habit_item.html', habit=habit)
    return redirect(url_for('habits.habits'))


@habits_bp.route('/<int:habit_id>/toggle_active', methods=['POST'])
@login_required
def toggle_active(habit_id):
    habit = _owned(habit_id)
    update_habit(habit, {'isActive': not habit.is_active})

    if request.headers.get('HX-Request'):
        return render_template('partials/habit_item.html', habit=habit)
    return redirect(url_for('habits.habits'))


@habits_bp.route('/<int:habit_id>/delete', methods=['POST'])
@login_required
def delete_habit_view(habit_id):
    delete_habit(_owned(habit_id))
    if request.headers.get('HX-Request'):
        return ''
    return redirect(url_for('habits.habits'))
