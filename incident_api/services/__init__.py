from incident_api.services.transitions import apply_update, format_total_time, plan_update
from incident_api.services.csv_export import export_incidents_csv, export_filename
