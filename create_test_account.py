import random
from app import app
from models import db, User, Habit, Streak
from werkzeug.security import generate_password_hash
from datetime import date, timedelta
from services.scoring_service import save_day
from services.streak_service import record_status

DEMO_HABITS = [
    ('Morning Run', 'GOOD', 10, -5),
    ('Read 20 pages', 'GOOD', 5, 0),
    ('Doomscrolling', 'BAD', -10, 5),
]

DEMO_STREAKS = [
    ('No Sugar', 'AVOID'),
    ('Meditate', 'MAINTAIN'),
]

def create_test_account(days=30):
    with app.app_context():
        # 1. Create John
        john = User.query.filter_by(username='john').first()
        if not john:
            john = User(
                username='john',
                password_hash=generate_password_hash('password123', method='scrypt')
            )
            db.session.add(john)
            db.session.commit()
            print("User 'john' created.")
        else:
            print("User 'john' already exists.")

        # 2. Habits and streaks
        if not john.habits:
            for name, category, points, missed in DEMO_HABITS:
                db.session.add(Habit(name=name, category=category, points=points,
                                     missed_points=missed, user_id=john.id))
            for name, streak_type in DEMO_STREAKS:
                db.session.add(Streak(name=name, type=streak_type, user_id=john.id,
                                      start_date=date.today() - timedelta(days=days)))
            db.session.commit()
            print(f"Added {len(DEMO_HABITS)} habits and {len(DEMO_STREAKS)} streaks.")

        # 3. Fill the last N days
        print(f"Logging {days} days of history...")
        rng = random.Random(42)
        for i in range(days, 0, -1):
            day = date.today() - timedelta(days=i)
            entries = [{'habitId': h.id, 'status': rng.choice(['COMPLETED', 'COMPLETED', 'MISSED', 'SKIPPED'])}
                       for h in john.habits]
            save_day(john, day, entries)
            for streak in john.streaks:
                record_status(streak, day, rng.choice(['FOLLOWED'] * 6 + ['BROKEN', 'SKIP']))

        print("Test data populated successfully.")

if __name__ == "__main__":
    create_test_account()
