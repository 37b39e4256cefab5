class IncidentError(Exception):
    """Base class for errors raised by the incident core."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message}


class ValidationError(IncidentError):
    """Raised when a request is missing a required field or carries a bad value."""

    status_code = 400

    def __init__(self, message, field=None):
        super().__init__(message)
        self.field = field


class NotFoundError(IncidentError):
    """Raised when an id does not reference an existing incident."""

    status_code = 404

    def __init__(self, incident_id):
        super().__init__(f'Incident with ID {incident_id} not found')
        self.incident_id = incident_id


class StorageError(IncidentError):
    """Raised when the underlying database fails; the session has been rolled back."""

    status_code = 500
