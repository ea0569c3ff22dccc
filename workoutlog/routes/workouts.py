from flask import Blueprint, request, jsonify, current_app
from sqlalchemy import func, update

from workoutlog.extensions import db
from workoutlog.errors import NotFoundError
from workoutlog.models.workout import WorkoutLog
from workoutlog.schemas import WorkoutPayload, require_fields

workouts_bp = Blueprint('workouts', __name__)

@workouts_bp.route('', methods=['POST'])
def create_workout():
    data = request.get_json(silent=True)
    require_fields(data)
    payload = WorkoutPayload.from_request(data)

    entry = WorkoutLog(
        date=payload.date,
        exercise=payload.exercise,
        weight_kg=payload.weight_kg,
        reps=payload.reps,
        note=payload.note
    )

    db.session.add(entry)
    db.session.commit()
    current_app.logger.info(f"Created workout log {entry.id} ({entry.exercise})")

    return jsonify(entry.to_dict()), 201

@workouts_bp.route('', methods=['GET'])
def get_workouts():
    # Newest first; same-day entries by insertion order
    entries = WorkoutLog.query.order_by(WorkoutLog.date.desc(), WorkoutLog.id.desc()).all()
    return jsonify([entry.to_dict() for entry in entries])

@workouts_bp.route('/<int:workout_id>', methods=['PUT'])
def update_workout(workout_id):
    payload = WorkoutPayload.from_request(request.get_json(silent=True))

    # A null or missing field keeps the stored value
    statement = (
        update(WorkoutLog)
        .where(WorkoutLog.id == workout_id)
        .values({
            WorkoutLog.date: func.coalesce(payload.date, WorkoutLog.date),
            WorkoutLog.exercise: func.coalesce(payload.exercise, WorkoutLog.exercise),
            WorkoutLog.weight_kg: func.coalesce(payload.weight_kg, WorkoutLog.weight_kg),
            WorkoutLog.reps: func.coalesce(payload.reps, WorkoutLog.reps),
            WorkoutLog.note: func.coalesce(payload.note, WorkoutLog.note),
        })
        .returning(WorkoutLog)
        .execution_options(synchronize_session=False)
    )
    entry = db.session.execute(statement).scalar_one_or_none()

    if entry is None:
        db.session.rollback()
        raise NotFoundError()

    # Serialize before commit expires the returned row
    updated = entry.to_dict()
    db.session.commit()
    return jsonify(updated)

@workouts_bp.route('/<int:workout_id>', methods=['DELETE'])
def delete_workout(workout_id):
    deleted = WorkoutLog.query.filter_by(id=workout_id).delete(synchronize_session=False)

    if not deleted:
        db.session.rollback()
        raise NotFoundError()

    db.session.commit()
    current_app.logger.info(f"Deleted workout log {workout_id}")

    return jsonify({'ok': True})
