import csv
import io

from incident_api.utils.dates import format_locale_datetime

CSV_HEADERS = [
    'ID',
    'Reported By',
    'Assigned To',
    'Date & Time',
    'Description',
    'Status',
    'Closed On',
    'Total Time'
]


def incident_row(incident, datetime_format=None):
    return [
        incident.id,
        incident.reported_by,
        incident.assigned_to,
        format_locale_datetime(incident.date_time, datetime_format),
        incident.description,
        incident.status,
        format_locale_datetime(incident.closed_on, datetime_format),
        incident.total_time or ''
    ]


def export_incidents_csv(incidents, datetime_format=None):
    """Serialize incidents to CSV text, rows joined by newlines.

    The header line is plain; every record field is quoted and embedded
    double quotes are doubled. There is no trailing newline, so an empty
    collection yields just the header row.
    """
    buffer = io.StringIO()
    buffer.write(','.join(CSV_HEADERS) + '\n')
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')
    for incident in incidents:
        writer.writerow(incident_row(incident, datetime_format))
    return buffer.getvalue()[:-1]


def export_filename(today):
    return f"incidents-{today.strftime('%Y-%m-%d')}.csv"
