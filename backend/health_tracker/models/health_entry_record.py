from datetime import datetime
from health_tracker import db


class HealthEntryRecord(db.Model):
    """
    Canonical storage row for a health entry.

    Weight is always kilograms and waist always centimeters, whatever unit
    the entry was logged in. Several rows may share a date.
    """
    __tablename__ = 'health_entries'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    # Calendar date of the measurement
    date = db.Column(db.Date, nullable=False, index=True)

    # Canonical measurements
    weight = db.Column(db.Float, nullable=False)  # kg
    waist = db.Column(db.Float, nullable=False)  # cm

    # Timestamp when entry was created
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'date': self.date.isoformat() if self.date else None,
            'weight': self.weight,
            'waist': self.waist,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<HealthEntryRecord {self.id} - {self.date} - {self.weight} kg / {self.waist} cm>'
