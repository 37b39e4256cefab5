from incident_api.store.base import IncidentStore
from incident_api.store.sql import SQLAlchemyIncidentStore
