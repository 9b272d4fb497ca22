import json
from flask import render_template, redirect, url_for, flash, Response
from flask_login import login_required, current_user
from datetime import date
from . import settings_bp
from services.data_service import reset_day_logs, export_user_data


@settings_bp.route('/')
@login_required
def settings():
    return render_template('settings.html')


@settings_bp.route('/reset', methods=['POST'])
@login_required
def reset():
    deleted = reset_day_logs(current_user)
    flash(f'All data has been reset ({deleted} days removed).', 'success')
    return redirect(url_for('settings.settings'))


@settings_bp.route('/export')
@login_required
def export():
    payload = json.dumps(export_user_data(current_user), indent=2)
    filename = f"streakboard-export-{date.today().isoformat()}.json"
    return Response(payload, mimetype='application/json',
                    headers={'Content-Disposition': f'attachment; filename={filename}'})
