import os
import sys
import pytest

# Ensure the backend root (containing the `hiscores` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from hiscores import create_app


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    PAGE_SIZE = 20
    MIN_CREDENTIAL_LENGTH = 6
    CORS_ORIGINS = ['http://localhost:5173']
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    # No outer app context: each request resolves its bearer token afresh
    yield create_app(TestConfig)


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def services(flask_app):
    return flask_app.extensions['hiscores']


@pytest.fixture()
def signed_up(client):
    res = client.post('/signup', json={'userHandle': 'DukeNukem', 'password': '123456'})
    assert res.status_code == 201
    return {'userHandle': 'DukeNukem', 'password': '123456'}


@pytest.fixture()
def token(client, signed_up):
    res = client.post('/login', json=signed_up)
    assert res.status_code == 200
    return res.get_json()['jsonWebToken']


@pytest.fixture()
def auth_headers(token):
    return {'Authorization': f'Bearer {token}'}
