import calendar
from flask import render_template, request, abort
from flask_login import login_required, current_user
from datetime import date
from . import history_bp
from services.scoring_service import history as score_history, scores_between, summary
from utils import month_grid, wrap_month


@history_bp.route('/')
@login_required
def calendar_view():
    today = date.today()
    year = request.args.get('year', today.year, type=int)
    month = request.args.get('month', today.month, type=int)
    year, month = wrap_month(year, month)
    # The grid spills into the neighbouring years
    if not 1 < year < 9999 or not 1 <= month <= 12:
        abort(400)

    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])
    scores = scores_between(current_user, first, last)

    prev_year, prev_month = wrap_month(year, month - 1)
    next_year, next_month = wrap_month(year, month + 1)

    return render_template('history.html',
                           year=year, month=month, month_name=calendar.month_name[month],
                           weeks=month_grid(year, month, scores),
                           prev_year=prev_year, prev_month=prev_month,
                           next_year=next_year, next_month=next_month)


@history_bp.route('/analytics')
@login_required
def analytics():
    days = score_history(current_user)
    points = [{
        'date': d.date.isoformat(),
        'label': f"{d.date:%b} {d.date.day}",
        'score': d.total_score,
    } for d in days]
    return render_template('analytics.html', points=points,
                           stats=summary(d.total_score for d in days))
