from flask import Blueprint, jsonify
from sqlalchemy import func

from workoutlog.models.workout import WorkoutLog

bests_bp = Blueprint('bests', __name__)

def strength_order():
    """Heaviest first, then most recent date, then latest inserted."""
    return (WorkoutLog.weight_kg.desc(), WorkoutLog.date.desc(), WorkoutLog.id.desc())

@bests_bp.route('', methods=['GET'])
def get_personal_bests():
    # Rank each exercise's weighted sets and keep the top one
    ranked = (
        WorkoutLog.query
        .with_entities(
            WorkoutLog.id.label('id'),
            func.row_number().over(
                partition_by=WorkoutLog.exercise,
                order_by=strength_order()
            ).label('position')
        )
        .filter(WorkoutLog.weight_kg.isnot(None))
        .subquery()
    )

    bests = (
        WorkoutLog.query
        .join(ranked, WorkoutLog.id == ranked.c.id)
        .filter(ranked.c.position == 1)
        .order_by(WorkoutLog.exercise.asc())
        .all()
    )
    return jsonify([entry.to_dict() for entry in bests])

@bests_bp.route('/<path:exercise>', methods=['GET'])
def get_exercise_history(exercise):
    entries = (
        WorkoutLog.query
        .filter(WorkoutLog.exercise == exercise, WorkoutLog.weight_kg.isnot(None))
        .order_by(*strength_order())
        .all()
    )
    return jsonify([entry.to_dict() for entry in entries])
