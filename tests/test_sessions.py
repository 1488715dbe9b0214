from datetime import datetime, timedelta

import pytest

from journal import create_app, _ensure_sqlite_directory
from journal.config import Config, TestConfig


@pytest.fixture(scope='module')
def durable_app(tmp_path_factory):
    """The production session store: SQLAlchemy-backed, on a SQLite file
    whose directory does not exist yet."""
    db_path = tmp_path_factory.mktemp('data') / 'instance' / 'journal.db'

    class DurableConfig(Config):
        TESTING = True
        SQLALCHEMY_DATABASE_URI = f'sqlite:///{db_path}'
        LOG_LEVEL = 'WARNING'

    app = create_app(DurableConfig)
    assert db_path.parent.is_dir()
    yield app


def _session_record(app, client):
    cookie = client.get_cookie('session')
    assert cookie is not None
    model = app.session_interface.sql_session_model
    with app.app_context():
        return model.query.filter(model.session_id.endswith(cookie.value)).first()


def test_durable_store_full_flow(durable_app, register, login, compose):
    assert durable_app.config['SESSION_TYPE'] == 'sqlalchemy'
    client = durable_app.test_client()

    r = register(client, username='carol', email='carol@x.com')
    assert r.headers['Location'] == '/home'
    assert 'Welcome to Blog Journal!' in client.get('/home').get_data(as_text=True)

    compose(client, title='Stored', content='In the database')
    assert 'Stored</a>' in client.get('/home').get_data(as_text=True)

    client.get('/logout')
    assert 'Goodbye!' in client.get('/').get_data(as_text=True)

    r = client.get('/compose')
    assert r.headers['Location'] == '/login'
    r = login(client, username='carol')
    assert r.headers['Location'] == '/compose'
    assert client.get('/compose').status_code == 200


def test_durable_session_record_lasts_seven_days(durable_app, register):
    client = durable_app.test_client()
    register(client, username='dave', email='dave@x.com')

    record = _session_record(durable_app, client)
    assert record is not None
    remaining = record.expiry - datetime.utcnow()
    assert timedelta(days=6, hours=23) < remaining <= timedelta(days=7)


def test_durable_session_survives_new_client_with_same_cookie(durable_app, register):
    client = durable_app.test_client()
    register(client, username='erin', email='erin@x.com')
    sid = client.get_cookie('session').value

    other = durable_app.test_client()
    other.set_cookie('session', sid)
    assert other.get('/home').status_code == 200


def test_ensure_sqlite_directory(tmp_path):
    target = tmp_path / 'a' / 'b' / 'journal.db'
    _ensure_sqlite_directory(f'sqlite:///{target}')
    assert target.parent.is_dir()

    # nothing to create for these
    _ensure_sqlite_directory('sqlite:///:memory:')
    _ensure_sqlite_directory('sqlite://')
    _ensure_sqlite_directory('postgresql://user:pw@localhost/journal')


def test_each_test_app_has_its_own_session_cache(register):
    first = create_app(TestConfig)
    second = create_app(TestConfig)
    assert first.config['SESSION_CACHELIB'] is not second.config['SESSION_CACHELIB']

    client = first.test_client()
    register(client)
    assert client.get('/home').status_code == 200

    # the same cookie means nothing to the other app
    stranger = second.test_client()
    stranger.set_cookie('session', client.get_cookie('session').value)
    assert stranger.get('/home').status_code == 302
