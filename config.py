import os
from pathlib import Path

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent


def _env_flag(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _database_uri_from_parts():
    """Build a MySQL URI from DB_HOST/DB_USER/DB_PASSWORD/DB_DATABASE."""
    host = os.getenv('DB_HOST')
    database = os.getenv('DB_DATABASE')
    if not host or not database:
        return None
    user = os.getenv('DB_USER', '')
    password = os.getenv('DB_PASSWORD', '')
    credentials = f"{user}:{password}@" if password else (f"{user}@" if user else '')
    return f"mysql+pymysql://{credentials}{host}/{database}"


class Config:
    # Secret key - will be validated later
    SECRET_KEY = os.getenv('SECRET_KEY')

    # Database
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL') or _database_uri_from_parts()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Which reporting flow is active: 'otp' (email + one-time code) or 'phone'
    REPORT_VARIANT = os.getenv('REPORT_VARIANT', 'otp').strip().lower()

    # One-time codes
    OTP_TTL_MINUTES = int(os.getenv('OTP_TTL_MINUTES', '5'))
    OTP_DEBUG_ECHO = _env_flag('OTP_DEBUG_ECHO')

    # Upload folder
    UPLOAD_FOLDER = os.path.join(BASE_DIR, 'lostfound', 'static', 'images', 'uploads')
    UPLOAD_URL_PATH = '/static/images/uploads'

    # Upload size limit
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024  # 5MB

    # Flask settings
    DEBUG = os.getenv('FLASK_ENV') == 'development'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Ping the database once while booting; failures are logged, not fatal
    CHECK_DB_ON_STARTUP = _env_flag('CHECK_DB_ON_STARTUP', True)

    # The JSON endpoints are posted by the report pages via fetch()
    WTF_CSRF_ENABLED = False

    @classmethod
    def init_app(cls, app):
        """Initialize configuration with the app instance"""
        if app.config['REPORT_VARIANT'] not in ('otp', 'phone'):
            raise ValueError("REPORT_VARIANT must be 'otp' or 'phone'")

        # Set defaults for development if not set
        if not app.config['SECRET_KEY']:
            if app.config['DEBUG'] or app.config.get('TESTING'):
                app.config['SECRET_KEY'] = 'dev-secret-key-for-development-only'
                app.logger.warning('Using default SECRET_KEY for development')
            else:
                raise ValueError('SECRET_KEY must be set in production')

        if not app.config['SQLALCHEMY_DATABASE_URI']:
            if app.config['DEBUG']:
                # Default SQLite for development
                app.config['SQLALCHEMY_DATABASE_URI'] = 'sqlite:///' + os.path.join(BASE_DIR, 'database.db')
                app.logger.warning('Using SQLite database for development')
            else:
                raise ValueError('DATABASE_URL or DB_HOST/DB_DATABASE must be set in production')

        # Create upload folder if it doesn't exist
        os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    SECRET_KEY = 'testing'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    REPORT_VARIANT = 'otp'
    OTP_DEBUG_ECHO = True
    CHECK_DB_ON_STARTUP = False
