from incident_api.errors import ValidationError

REQUIRED_FIELDS = ['reportedBy', 'assignedTo', 'dateTime', 'description']


def validate_create_fields(fields):
    for field in REQUIRED_FIELDS:
        value = fields.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f'Missing required field: {field}', field=field)


class IncidentStore:
    """Persistence contract the incident core depends on.

    ``create`` assigns the id, ``list`` returns incidents by descending id,
    and ``get``/``update``/``delete`` raise ``NotFoundError`` for unknown ids.
    """

    def create(self, fields):
        raise NotImplementedError  # pragma: no cover

    def get(self, incident_id):
        raise NotImplementedError  # pragma: no cover

    def list(self):
        raise NotImplementedError  # pragma: no cover

    def update(self, incident_id, partial):
        raise NotImplementedError  # pragma: no cover

    def delete(self, incident_id):
        raise NotImplementedError  # pragma: no cover
