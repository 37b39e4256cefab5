"""
Pytest configuration and shared fixtures.

Every test gets a fresh application bound to an in-memory SQLite database
and a temporary upload folder.
"""

from datetime import datetime

import pytest

from incident_api.db.db import db
from incident_api.manage import create_app


@pytest.fixture
def app(tmp_path):
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'UPLOAD_FOLDER': str(tmp_path / 'uploads'),
        'EXPORT_DATETIME_FORMAT': '',
        'LOG_LEVEL': 'WARNING',
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.incident_store


@pytest.fixture
def incident_fields():
    return {
        'reportedBy': 'Maria Santos',
        'assignedTo': 'Jon Reyes',
        'dateTime': '2024-01-01T00:00:00',
        'description': 'Gate barrier stuck in the open position',
    }


@pytest.fixture
def make_incident(store, incident_fields):
    def _make(**overrides):
        fields = dict(incident_fields)
        fields.update(overrides)
        return store.create(fields)
    return _make


@pytest.fixture
def jan_first():
    return datetime(2024, 1, 1, 0, 0, 0)
