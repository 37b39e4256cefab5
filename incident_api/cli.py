from datetime import date

import click
from flask import current_app

from incident_api.db.db import db
from incident_api.services.csv_export import export_filename, export_incidents_csv


@click.command('init-db')
def init_db_command():
    """Create the incidents table if it does not exist yet."""
    db.create_all()
    click.echo('Database initialized')


@click.command('export-csv')
@click.option('--output', '-o', type=click.Path(dir_okay=False), default=None,
              help='File to write (defaults to incidents-YYYY-MM-DD.csv).')
def export_csv_command(output):
    """Write every incident to a CSV file."""
    incidents = current_app.incident_store.list()
    csv_content = export_incidents_csv(
        incidents,
        current_app.config.get('EXPORT_DATETIME_FORMAT') or None
    )
    output = output or export_filename(date.today())
    with open(output, 'w', encoding='utf-8', newline='') as f:
        f.write(csv_content)
    click.echo(f'Exported {len(incidents)} incidents to {output}')


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(export_csv_command)
