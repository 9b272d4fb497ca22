from flask import Blueprint

main_bp = Blueprint('main', __name__)
habits_bp = Blueprint('habits', __name__)
streaks_bp = Blueprint('streaks', __name__)
history_bp = Blueprint('history', __name__)
api_bp = Blueprint('api', __name__)
settings_bp = Blueprint('settings', __name__)

from . import main, habits, streaks, history, api, settings
