from workoutlog.extensions import db

def test_store_failure_returns_driver_message(client, app):
    with app.app_context():
        db.drop_all()

    response = client.get('/api/workouts')

    assert response.status_code == 500
    assert response.get_json() == {'error': 'no such table: workout_logs'}

def test_store_failure_on_create(client, app):
    with app.app_context():
        db.drop_all()

    response = client.post('/api/workouts', json={'date': '2024-01-01', 'exercise': 'Squat'})

    assert response.status_code == 500
    assert 'no such table' in response.get_json()['error']

def test_unknown_route_is_json(client):
    response = client.get('/api/nothing-here')

    assert response.status_code == 404
    assert 'error' in response.get_json()

def test_wrong_method_is_json(client):
    response = client.patch('/api/workouts/1', json={'reps': 1})

    assert response.status_code == 405
    assert 'error' in response.get_json()

def test_errors_are_logged(client, caplog):
    client.put('/api/workouts/42', json={'reps': 1})

    assert 'Request rejected (404): not found' in caplog.text
