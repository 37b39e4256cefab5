import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from incident_api.cli import register_commands
from incident_api.config import Config
from incident_api.controllers.incidents import incident_bp, uploads_bp
from incident_api.db.db import init_db
from incident_api.store.sql import SQLAlchemyIncidentStore

# Tables are managed with Flask-Migrate:
# 1 flask --app incident_api.manage db migrate -m "your commit message"
# 2 flask --app incident_api.manage db upgrade
# For a quick local setup without migrations: flask --app incident_api.manage init-db

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


def configure_logging(level='INFO'):
    logger = logging.getLogger('incident_api')
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config['LOG_LEVEL'])

    CORS(app, origins=app.config['CORS_ORIGINS'])

    api_prefix = app.config['API_PREFIX'].rstrip('/')
    app.register_blueprint(incident_bp, url_prefix=f'{api_prefix}/incidents')
    app.register_blueprint(uploads_bp)

    init_db(app)
    app.incident_store = SQLAlchemyIncidentStore()
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    register_commands(app)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    @app.route("/")
    def index():
        return "Incident tracker backend is alive!"

    return app


if __name__ == '__main__':
    create_app().run(host="0.0.0.0", port=int(os.getenv('PORT', 5000)), debug=True)
