from workoutlog.extensions import db

class WorkoutLog(db.Model):
    __tablename__ = 'workout_logs'

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False)
    exercise = db.Column(db.Text, nullable=False)
    weight_kg = db.Column(db.Numeric(5, 2))
    reps = db.Column(db.Integer)
    note = db.Column(db.Text)
    created_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())

    def to_dict(self):
        return {
            'id': self.id,
            'date': self.date.strftime('%Y-%m-%d'),
            'exercise': self.exercise,
            'weight_kg': float(self.weight_kg) if self.weight_kg is not None else None,
            'reps': self.reps,
            'note': self.note,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
