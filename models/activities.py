from extensions import db
from utils.dates import utcnow, isoformat_utc


class Activity(db.Model):
    """A schedulable, assignable and completable item owned by a family."""
    __tablename__ = 'activities'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    category = db.Column(db.String(50), nullable=False)
    start_date = db.Column(db.DateTime, nullable=False, index=True)
    end_date = db.Column(db.DateTime)
    family_id = db.Column(db.Integer, db.ForeignKey('families.id'), nullable=False, index=True)
    created_by_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    assigned_to_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    completed = db.Column(db.Boolean, default=False, nullable=False)
    is_all_day = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    # Relationships
    family = db.relationship('Family', back_populates='activities')
    created_by = db.relationship('User', foreign_keys=[created_by_id])
    assigned_to = db.relationship('User', foreign_keys=[assigned_to_id])

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'category': self.category,
            'startDate': isoformat_utc(self.start_date),
            'endDate': isoformat_utc(self.end_date),
            'familyId': self.family_id,
            'createdBy': self.created_by_id,
            'assignedTo': self.assigned_to_id,
            'completed': self.completed,
            'isAllDay': self.is_all_day,
        }

    def __repr__(self):
        return f'<Activity {self.title}>'
