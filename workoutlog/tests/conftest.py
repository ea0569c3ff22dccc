import pytest
from workoutlog.app import create_app
from workoutlog.config import Settings
from workoutlog.extensions import db

@pytest.fixture(scope='function')
def app():
    """Create application for the tests."""
    app = create_app('testing', settings=Settings())
    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()

@pytest.fixture(scope='function')
def client(app):
    """Create a test client for the app."""
    return app.test_client()

@pytest.fixture(scope='function')
def create_workout(client):
    """Post a workout log and return the created record."""
    def _create(**fields):
        body = {'date': '2024-01-01', 'exercise': 'Squat'}
        body.update(fields)
        response = client.post('/api/workouts', json=body)
        assert response.status_code == 201
        return response.get_json()
    return _create
