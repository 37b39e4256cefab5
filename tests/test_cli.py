def test_init_db_command(app):
    result = app.test_cli_runner().invoke(args=['init-db'])
    assert result.exit_code == 0
    assert 'Database initialized' in result.output


def test_export_csv_command(app, make_incident, tmp_path):
    make_incident()
    make_incident(description='Second report')
    output = tmp_path / 'out.csv'

    result = app.test_cli_runner().invoke(args=['export-csv', '--output', str(output)])
    assert result.exit_code == 0
    assert 'Exported 2 incidents' in result.output

    lines = output.read_text(encoding='utf-8').split('\n')
    assert len(lines) == 3
    assert '"Second report"' in lines[1]
