from app import app
from models import db

def force_init():
    with app.app_context():
        tables = [t.name for t in db.metadata.sorted_tables]
        print(f"Dropping tables: {', '.join(reversed(tables))}")
        db.drop_all()
        print(f"Creating tables: {', '.join(tables)}")
        db.create_all()

        # Mark the migration head as applied
        from flask_migrate import stamp
        stamp()
        print(f"Database initialized with {len(tables)} tables and stamped.")

if __name__ == "__main__":
    force_init()
