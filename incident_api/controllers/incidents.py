import logging
import os
from datetime import date

from flask import Blueprint, Response, current_app, jsonify, request, send_from_directory

from incident_api.db.db import db
from incident_api.errors import IncidentError
from incident_api.services.csv_export import export_filename, export_incidents_csv
from incident_api.services.transitions import apply_update
from incident_api.store.base import validate_create_fields
from incident_api.utils.dates import parse_datetime
from incident_api.utils.uploads import remove_attachment, save_attachment

incident_bp = Blueprint('incidents', __name__)
uploads_bp = Blueprint('uploads', __name__)
logger = logging.getLogger(__name__)

CREATE_FIELDS = ['reportedBy', 'assignedTo', 'dateTime', 'description']


def get_store():
    return current_app.incident_store


def error_response(error):
    return jsonify(error.to_dict()), error.status_code


def unexpected_error(action, e):
    db.session.rollback()
    logger.exception(f"Unexpected error while {action}: {e}")
    return jsonify({'error': 'Internal server error'}), 500


@incident_bp.route('', methods=['POST'])
def create_incident():
    """Report a new incident (multipart form with an optional attachment, or JSON)"""
    if request.mimetype == 'application/json':
        data = request.get_json(silent=True)
        if data is None:
            data = {}
    else:
        data = request.form
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    fields = {field: data.get(field) for field in CREATE_FIELDS}
    upload_folder = current_app.config['UPLOAD_FOLDER']
    attachment = None

    try:
        validate_create_fields(fields)
        # Reject a bad timestamp before anything is written to disk
        parse_datetime(fields['dateTime'], 'dateTime')

        attachment = save_attachment(request.files.get('attachment'), upload_folder)
        fields['attachment'] = attachment
        incident = get_store().create(fields)
        return jsonify(incident.to_dict()), 201

    except IncidentError as e:
        remove_attachment(attachment, upload_folder)
        return error_response(e)
    except Exception as e:
        remove_attachment(attachment, upload_folder)
        return unexpected_error('creating incident', e)


@incident_bp.route('', methods=['GET'])
def list_incidents():
    """List all incidents, newest id first"""
    try:
        incidents = get_store().list()
        return jsonify([incident.to_dict() for incident in incidents]), 200
    except IncidentError as e:
        return error_response(e)
    except Exception as e:
        return unexpected_error('listing incidents', e)


@incident_bp.route('/export', methods=['GET'])
def export_incidents():
    """Download every incident as CSV"""
    try:
        csv_content = export_incidents_csv(
            get_store().list(),
            current_app.config.get('EXPORT_DATETIME_FORMAT') or None
        )
    except IncidentError as e:
        return error_response(e)
    except Exception as e:
        return unexpected_error('exporting incidents', e)

    filename = export_filename(date.today())
    return Response(
        csv_content,
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename="{filename}"'}
    )


@incident_bp.route('/<int:incident_id>', methods=['GET'])
def get_incident(incident_id):
    try:
        return jsonify(get_store().get(incident_id).to_dict()), 200
    except IncidentError as e:
        return error_response(e)
    except Exception as e:
        return unexpected_error(f'loading incident {incident_id}', e)


@incident_bp.route('/<int:incident_id>', methods=['PATCH'])
def update_incident(incident_id):
    """Change an incident's status and, when a closing time is given, its total time"""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    try:
        incident = apply_update(
            get_store(),
            incident_id,
            status=data.get('status'),
            closed_on=data.get('closedOn')
        )
        return jsonify(incident.to_dict()), 200
    except IncidentError as e:
        return error_response(e)
    except Exception as e:
        return unexpected_error(f'updating incident {incident_id}', e)


@incident_bp.route('/<int:incident_id>', methods=['DELETE'])
def delete_incident(incident_id):
    try:
        get_store().delete(incident_id)
        return jsonify({'message': f'Incident {incident_id} deleted successfully'}), 200
    except IncidentError as e:
        return error_response(e)
    except Exception as e:
        return unexpected_error(f'deleting incident {incident_id}', e)


@uploads_bp.route('/uploads/<path:filename>', methods=['GET'])
def get_attachment(filename):
    upload_folder = os.path.abspath(current_app.config['UPLOAD_FOLDER'])
    return send_from_directory(upload_folder, filename)
