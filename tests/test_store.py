from datetime import datetime
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from incident_api.errors import NotFoundError, StorageError, ValidationError
from incident_api.store.base import validate_create_fields


def test_create_starts_open(make_incident):
    incident = make_incident()
    assert incident.id is not None
    assert incident.status == 'Open'
    assert incident.closed_on is None
    assert incident.total_time is None
    assert incident.attachment is None
    assert incident.date_time == datetime(2024, 1, 1)
    assert incident.created_at is not None


def test_create_assigns_unique_ids(make_incident):
    ids = {make_incident().id for _ in range(5)}
    assert len(ids) == 5


def test_create_ignores_caller_supplied_closure(make_incident):
    incident = make_incident(status='Closed', closedOn='2024-01-02T00:00:00', totalTime='1 days')
    assert incident.status == 'Open'
    assert incident.closed_on is None
    assert incident.total_time is None


@pytest.mark.parametrize('field', ['reportedBy', 'assignedTo', 'dateTime', 'description'])
def test_create_requires_field(store, incident_fields, field):
    incident_fields[field] = '   '
    with pytest.raises(ValidationError) as exc_info:
        store.create(incident_fields)
    assert exc_info.value.field == field


def test_create_rejects_missing_field(store, incident_fields):
    del incident_fields['description']
    with pytest.raises(ValidationError):
        store.create(incident_fields)


def test_create_rejects_bad_datetime(store, incident_fields):
    incident_fields['dateTime'] = 'not a date'
    with pytest.raises(ValidationError):
        store.create(incident_fields)
    assert store.list() == []


def test_list_orders_by_descending_id(store, make_incident):
    first = make_incident()
    second = make_incident()
    third = make_incident()
    store.update(first.id, {'status': 'In Progress'})

    assert [incident.id for incident in store.list()] == [third.id, second.id, first.id]


def test_update_only_writes_mutable_fields(store, make_incident):
    incident = make_incident()
    updated = store.update(incident.id, {'status': 'In Progress', 'reportedBy': 'Someone else'})
    assert updated.status == 'In Progress'
    assert updated.reported_by == 'Maria Santos'


def test_update_missing_incident(store):
    with pytest.raises(NotFoundError):
        store.update(999, {'status': 'Closed'})


def test_get_missing_incident(store):
    with pytest.raises(NotFoundError):
        store.get(999)


def test_delete_removes_incident(store, make_incident):
    incident = make_incident()
    store.delete(incident.id)
    assert store.list() == []
    with pytest.raises(NotFoundError):
        store.get(incident.id)


def test_delete_missing_incident(store):
    with pytest.raises(NotFoundError):
        store.delete(999)


def test_commit_failure_becomes_storage_error(store, incident_fields):
    with patch.object(store.session, 'commit', side_effect=OperationalError('INSERT', {}, Exception('db down'))):
        with pytest.raises(StorageError):
            store.create(incident_fields)
    assert store.list() == []


def test_required_field_check_needs_no_backend(incident_fields):
    validate_create_fields(incident_fields)

    incident_fields['reportedBy'] = None
    with pytest.raises(ValidationError) as exc_info:
        validate_create_fields(incident_fields)
    assert exc_info.value.field == 'reportedBy'
