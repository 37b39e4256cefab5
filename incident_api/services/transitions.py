"""Status transitions and the elapsed-time summary stored on closure."""

import logging
from datetime import timedelta

from incident_api.errors import ValidationError
from incident_api.models.incident import IncidentStatus
from incident_api.utils.dates import parse_datetime

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 24


def elapsed_hours(start, end):
    # Floored toward negative infinity, also for spans that end before they start
    return (end - start) // timedelta(hours=1)


def format_total_time(start, end):
    """Summarise the time between report and closure.

    Spans of a day or more are reported in whole days (partial days are
    truncated), shorter spans in whole hours.
    """
    hours = elapsed_hours(start, end)
    if hours >= HOURS_PER_DAY:
        return f'{hours // HOURS_PER_DAY} days'
    return f'{hours} hours'


def plan_update(incident, status=None, closed_on=None):
    """Return the wire-keyed fields that an update request changes on ``incident``.

    Any status may replace any other. ``closedOn`` and ``totalTime`` are only
    touched when a closing time is supplied.
    """
    changes = {}

    if status:
        if not IncidentStatus.is_valid(status):
            raise ValidationError(
                f"Invalid status: {status!r}. Expected one of: {', '.join(IncidentStatus.ALL)}",
                field='status'
            )
        changes['status'] = status

    if closed_on:
        closed_on = parse_datetime(closed_on, 'closedOn')
        changes['closedOn'] = closed_on
        changes['totalTime'] = format_total_time(incident.date_time, closed_on)
    elif changes.get('status') == IncidentStatus.CLOSED and incident.closed_on is None:
        logger.warning(f"Incident {incident.id} closed without a closing time; total time left unset")

    return changes


def apply_update(store, incident_id, status=None, closed_on=None):
    """Load the incident, plan the transition and persist it through ``store``."""
    incident = store.get(incident_id)
    changes = plan_update(incident, status=status, closed_on=closed_on)
    if not changes:
        return incident
    return store.update(incident_id, changes)
