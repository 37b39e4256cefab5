import logging

from sqlalchemy.exc import SQLAlchemyError

from incident_api.db.db import db
from incident_api.errors import NotFoundError, StorageError
from incident_api.models.incident import Incident, IncidentStatus
from incident_api.store.base import IncidentStore, validate_create_fields
from incident_api.utils.dates import parse_datetime

logger = logging.getLogger(__name__)

# Wire key -> column for the fields an update is allowed to touch
MUTABLE_FIELDS = {
    'status': 'status',
    'closedOn': 'closed_on',
    'totalTime': 'total_time'
}


class SQLAlchemyIncidentStore(IncidentStore):
    """Incident store backed by the Flask-SQLAlchemy session."""

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def create(self, fields):
        validate_create_fields(fields)

        incident = Incident(
            reported_by=str(fields['reportedBy']).strip(),
            assigned_to=str(fields['assignedTo']).strip(),
            date_time=parse_datetime(fields['dateTime'], 'dateTime'),
            description=str(fields['description']).strip(),
            attachment=fields.get('attachment') or None,
            status=IncidentStatus.OPEN,
            closed_on=None,
            total_time=None
        )

        try:
            self.session.add(incident)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to create incident: {e}")
            raise StorageError('Failed to save incident') from e

        logger.info(f"Created incident {incident.id} assigned to {incident.assigned_to}")
        return incident

    def get(self, incident_id):
        try:
            incident = self.session.get(Incident, incident_id)
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageError('Failed to load incident') from e

        if incident is None:
            raise NotFoundError(incident_id)
        return incident

    def list(self):
        try:
            return self.session.execute(
                db.select(Incident).order_by(Incident.id.desc())
            ).scalars().all()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageError('Failed to list incidents') from e

    def update(self, incident_id, partial):
        incident = self.get(incident_id)

        for key, column in MUTABLE_FIELDS.items():
            if key in partial:
                setattr(incident, column, partial[key])

        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to update incident {incident_id}: {e}")
            raise StorageError('Failed to update incident') from e

        return incident

    def delete(self, incident_id):
        try:
            deleted = self.session.execute(
                db.delete(Incident).where(Incident.id == incident_id)
            ).rowcount
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to delete incident {incident_id}: {e}")
            raise StorageError('Failed to delete incident') from e

        if deleted == 0:
            raise NotFoundError(incident_id)
        logger.info(f"Deleted incident {incident_id}")
