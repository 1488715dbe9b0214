import pytest

from journal import create_app
from journal.config import TestConfig


@pytest.fixture()
def app():
    """A fresh app with its own in-memory database."""
    app = create_app(TestConfig)
    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def register():
    """POST /register with the given credentials."""
    def _register(client, username='alice', email='alice@x.com', password='pw123', follow=False):
        return client.post('/register',
                           data={'username': username, 'email': email, 'password': password},
                           follow_redirects=follow)
    return _register


@pytest.fixture()
def login():
    """POST /login with the given credentials."""
    def _login(client, username='alice', password='pw123', follow=False):
        return client.post('/login',
                           data={'username': username, 'password': password},
                           follow_redirects=follow)
    return _login


@pytest.fixture()
def compose():
    """POST /compose and return the response."""
    def _compose(client, title='Hi', content='World', follow=False):
        return client.post('/compose',
                           data={'postTitle': title, 'postBody': content},
                           follow_redirects=follow)
    return _compose
