import os
import logging
from flask import Flask, render_template, request, jsonify, redirect, url_for
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_wtf.csrf import CSRFError
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv
from models import db, User
from extensions import csrf
from auth import auth
from routes import main_bp, habits_bp, streaks_bp, history_bp, api_bp, settings_bp
from utils import format_points, score_tone

load_dotenv()


def database_uri():
    uri = (os.environ.get('SQLALCHEMY_DATABASE_URI')
           or os.environ.get('DATABASE_URL')
           or 'sqlite:///streakboard.sqlite3')
    if uri.startswith("postgres://"):
        uri = uri.replace("postgres://", "postgresql://", 1)
    return uri


logging.basicConfig(
    level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
)

app = Flask(__name__)
app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev_key_change_in_prod')
app.config['SQLALCHEMY_DATABASE_URI'] = database_uri()
app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

db.init_app(app)
migrate = Migrate(app, db)
csrf.init_app(app)

login_manager = LoginManager()
login_manager.login_view = 'auth.login'
login_manager.init_app(app)


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))


@login_manager.unauthorized_handler
def unauthorized():
    if request.blueprint == 'api':
        return jsonify({'error': 'Unauthorized'}), 401
    return redirect(url_for('auth.login', next=request.path))


@app.errorhandler(CSRFError)
def handle_csrf_error(e):
    app.logger.warning("CSRF check failed on %s: %s", request.path, e.description)
    if request.blueprint == 'api':
        return jsonify({'error': e.description}), 400
    return render_template('error.html', code=400, message=e.description), 400


@app.errorhandler(404)
def not_found(e):
    if request.path.startswith('/api/'):
        return jsonify({'error': 'Not found'}), 404
    return render_template('error.html', code=404, message='Page not found'), 404


@app.errorhandler(HTTPException)
def http_error(e):
    # Anything without its own handler, e.g. 405 on an API route
    if request.path.startswith('/api/'):
        return jsonify({'error': e.description}), e.code
    return e


@app.errorhandler(500)
def server_error(e):
    db.session.rollback()
    app.logger.error("Unhandled error on %s %s", request.method, request.path)
    if request.path.startswith('/api/'):
        return jsonify({'error': 'Internal server error'}), 500
    return render_template('error.html', code=500, message='Something went wrong'), 500


@app.template_filter('points')
def points_filter(value):
    return format_points(value)


@app.template_filter('tone')
def tone_filter(value):
    return score_tone(value)


app.register_blueprint(auth)
app.register_blueprint(main_bp)
app.register_blueprint(habits_bp, url_prefix='/habits')
app.register_blueprint(streaks_bp, url_prefix='/streaks')
app.register_blueprint(history_bp, url_prefix='/history')
app.register_blueprint(settings_bp, url_prefix='/settings')
app.register_blueprint(api_bp, url_prefix='/api')


@app.cli.command('init-db')
def init_db_command():
    """Create all tables without running migrations."""
    db.create_all()
    print("Database tables created.")


if __name__ == '__main__':
    app.run(debug=os.environ.get('FLASK_DEBUG') == '1')
