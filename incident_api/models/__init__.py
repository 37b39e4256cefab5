from incident_api.models.incident import Incident, IncidentStatus
