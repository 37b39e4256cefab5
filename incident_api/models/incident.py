from incident_api.models.base import db, utcnow, isoformat_or_none


class IncidentStatus:
    OPEN = 'Open'
    IN_PROGRESS = 'In Progress'
    CLOSED = 'Closed'

    ALL = (OPEN, IN_PROGRESS, CLOSED)

    @classmethod
    def is_valid(cls, value):
        return value in cls.ALL


class Incident(db.Model):
    __tablename__ = 'incidents'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    reported_by = db.Column(db.String(255), nullable=False)
    assigned_to = db.Column(db.String(255), nullable=False)
    date_time = db.Column(db.DateTime, nullable=False)
    description = db.Column(db.Text, nullable=False)
    attachment = db.Column(db.String(255), nullable=True)
    status = db.Column(db.String(20), nullable=False, default=IncidentStatus.OPEN)

    # Set together when the incident is closed with a closing time
    closed_on = db.Column(db.DateTime, nullable=True)
    total_time = db.Column(db.String(50), nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'reportedBy': self.reported_by,
            'assignedTo': self.assigned_to,
            'dateTime': isoformat_or_none(self.date_time),
            'description': self.description,
            'attachment': self.attachment,
            'status': self.status,
            'closedOn': isoformat_or_none(self.closed_on),
            'totalTime': self.total_time,
            'createdAt': isoformat_or_none(self.created_at)
        }

    def __repr__(self):
        return f'<Incident {self.id} - {self.status} - Assigned to {self.assigned_to}>'
