import flask_migrate
from models import db, User
from force_init_db import force_init

def test_force_init_recreates_tables(client, monkeypatch, capsys):
    stamped = []
    monkeypatch.setattr(flask_migrate, 'stamp', lambda *args, **kwargs: stamped.append(True))
    db.session.add(User(username='leftover', password_hash='hash'))
    db.session.commit()

    force_init()

    out = capsys.readouterr().out
    assert 'Creating tables: user' in out
    assert 'day_log' in out
    assert 'streak_log' in out
    assert 'with 6 tables' in out
    assert stamped == [True]
    assert User.query.count() == 0
