import datetime
from typing import Optional

import pydantic

from workoutlog.errors import ValidationError

FIELDS = ('date', 'exercise', 'weight_kg', 'reps', 'note')


class WorkoutPayload(pydantic.BaseModel):
    """Request body for creating or updating a workout log.

    Every field is optional here; creation additionally calls
    require_fields(). On update a missing or null field means
    "keep the stored value".
    """
    date: Optional[datetime.date] = None
    exercise: Optional[str] = None
    # Matches the NUMERIC(5, 2) column
    weight_kg: Optional[pydantic.condecimal(max_digits=5, decimal_places=2)] = None
    reps: Optional[int] = None
    note: Optional[str] = None

    @classmethod
    def from_request(cls, data):
        if not isinstance(data, dict):
            data = {}
        try:
            return cls(**{key: data.get(key) for key in FIELDS})
        except pydantic.ValidationError as e:
            fields = sorted({str(err['loc'][0]) for err in e.errors() if err['loc']})
            raise ValidationError(f"invalid value for: {', '.join(fields)}")


def require_fields(data):
    """Reject a create request that lacks a date or an exercise."""
    if not isinstance(data, dict) or not data.get('date') or not data.get('exercise'):
        raise ValidationError('date & exercise are required')
