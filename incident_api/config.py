import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application settings read from the environment (and a local .env file)."""

    SECRET_KEY = os.getenv('SECRET_KEY', 'change-me-incident-tracker')

    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///incidents.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    UPLOAD_FOLDER = os.getenv('UPLOAD_FOLDER', './uploads')
    MAX_CONTENT_LENGTH = int(os.getenv('MAX_CONTENT_LENGTH', 10 * 1024 * 1024))

    API_PREFIX = os.getenv('API_PREFIX', '/api')
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    # Empty means the M/D/YYYY, h:MM:SS AM style used by existing exports
    EXPORT_DATETIME_FORMAT = os.getenv('EXPORT_DATETIME_FORMAT', '')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    JSON_SORT_KEYS = False
