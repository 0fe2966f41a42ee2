"""
Shared pytest fixtures for the Family Tracker test suite.

Every test gets a fresh application built with TestingConfig (in-memory
SQLite).  HTTP tests drive the API through Flask test clients, one client per
user so each keeps its own session cookie.  Model and service tests use the
``app_ctx`` fixture, which pushes an application context for the duration of
the test.  Do not combine ``app_ctx`` with test-client requests in one test:
requests would share the pushed context and its ``g``.
"""
import pytest
from app import create_app
from extensions import db as _db


DEFAULT_PASSWORD = 'password123'


class RecordingMailer:
    """Stands in for InviteMailer and records what would have been sent."""

    def __init__(self, succeed=True):
        self.succeed = succeed
        self.sent = []

    def send_family_invite(self, invite_email, family_name, invite_url):
        self.sent.append((invite_email, family_name, invite_url))
        return self.succeed


# ---------------------------------------------------------------------------
# Application / database lifecycle
# ---------------------------------------------------------------------------

@pytest.fixture
def app():
    """Create a test Flask application with an in-memory SQLite database."""
    application = create_app('testing')
    yield application
    with application.app_context():
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def services(app):
    return app.extensions['services']


@pytest.fixture
def mailer(services):
    """Replace email delivery with a recording fake."""
    fake = RecordingMailer()
    services.mailer = fake
    services.invites.mailer = fake
    return fake


# ---------------------------------------------------------------------------
# HTTP helpers
# ---------------------------------------------------------------------------

def register(client, username, email, password=DEFAULT_PASSWORD, display_name=None):
    return client.post('/api/register', json={
        'username': username,
        'password': password,
        'displayName': display_name or username.title(),
        'email': email,
    })


def create_family(client, name='Smiths'):
    response = client.post('/api/families', json={'name': name})
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def invite(client, family_id, email, role='member'):
    return client.post(f'/api/families/{family_id}/members', json={
        'inviteEmail': email,
        'role': role,
    })


@pytest.fixture
def alice(app):
    """A test client logged in as alice (a@x.com)."""
    client = app.test_client()
    response = register(client, 'alice', 'a@x.com')
    assert response.status_code == 201, response.get_json()
    client.user = response.get_json()
    return client


@pytest.fixture
def bob(app):
    """A test client logged in as bob (b@x.com)."""
    client = app.test_client()
    response = register(client, 'bob', 'b@x.com')
    assert response.status_code == 201, response.get_json()
    client.user = response.get_json()
    return client


@pytest.fixture
def smiths(alice):
    """A family created by alice."""
    return create_family(alice, 'Smiths')


# ---------------------------------------------------------------------------
# Common model helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def user(app_ctx, services):
    return services.storage.create_user('admin', DEFAULT_PASSWORD, 'Admin User', 'admin@example.com')


@pytest.fixture
def family(app_ctx, services, user):
    return services.storage.create_family('Test Family', user)
