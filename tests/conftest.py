"""
Pytest fixtures and configuration for Todo API tests
"""
import pytest

from todo_api.app import create_app


@pytest.fixture
def app_config():
    """App configuration overrides for tests"""
    return {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'JWT_SECRET': 'test-secret-key',
        'RATELIMIT_ENABLED': False,
    }


@pytest.fixture
def app(app_config):
    """Fresh application backed by its own in-memory database"""
    return create_app(app_config)


@pytest.fixture
def app_ctx(app):
    """Application context for calling services directly"""
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Flask test client"""
    with app.test_client() as client:
        yield client


def bearer(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def register(client):
    """Sign up a user over HTTP; returns token, user and auth headers"""
    def _register(email, password='secret123', name='Test User'):
        response = client.post('/api/auth/signup', json={
            'email': email,
            'password': password,
            'name': name,
        })
        assert response.status_code == 201, response.get_json()
        data = response.get_json()['data']
        data['headers'] = bearer(data['token'])
        return data
    return _register


@pytest.fixture
def alice(register):
    return register('alice@example.com', name='Alice')


@pytest.fixture
def bob(register):
    return register('bob@example.com', name='Bob')


@pytest.fixture
def make_list(client):
    """Create a task list over HTTP and return its JSON"""
    def _make_list(headers, name='Work', **fields):
        response = client.post('/api/task-lists', json={'name': name, **fields}, headers=headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()['data']
    return _make_list


@pytest.fixture
def make_task(client):
    """Create a task over HTTP and return its JSON"""
    def _make_task(headers, task_list_id, title='Task', **fields):
        response = client.post(
            '/api/tasks',
            json={'taskListId': task_list_id, 'title': title, **fields},
            headers=headers,
        )
        assert response.status_code == 201, response.get_json()
        return response.get_json()['data']
    return _make_task
