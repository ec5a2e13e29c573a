import logging

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import RequestEntityTooLarge

# Load environment variables from .env file before Config reads them
load_dotenv()

from config import Config  # noqa: E402

# Initialize db globally
db = SQLAlchemy()

# Initialize migrate
migrate = Migrate()


def check_database(app):
    """Run a trivial query against the store. Returns True when it answers."""
    with app.app_context():
        try:
            db.session.execute(text('SELECT 1'))
            return True
        except SQLAlchemyError:
            app.logger.exception('Database connection failed; requests needing the store will fail')
            db.session.rollback()
            return False


def create_app(config_class=Config, overrides=None):
    app = Flask(__name__)
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(getattr(logging, app.config.get('LOG_LEVEL', 'INFO'), logging.INFO))
    config_class.init_app(app)

    # Initialize db here, now it's part of the app's context
    db.init_app(app)

    migrate.init_app(app, db)

    from lostfound.reports.models import Category, Report  # noqa: F401
    from lostfound.verification.models import VerificationCode  # noqa: F401

    from lostfound.main import main as main_blueprint
    from lostfound.reports import reports as reports_blueprint
    # Register blueprints
    app.register_blueprint(main_blueprint)
    app.register_blueprint(reports_blueprint)

    if app.config['REPORT_VARIANT'] == 'otp':
        from lostfound.verification import verification as verification_blueprint
        app.register_blueprint(verification_blueprint)

    @app.errorhandler(RequestEntityTooLarge)
    def upload_too_large(error):
        limit_mb = app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024)
        return jsonify({
            'success': False,
            'field': 'item_image',
            'message': f"Ukuran foto maksimal {limit_mb}MB."
        }), 413

    if app.config['CHECK_DB_ON_STARTUP']:
        check_database(app)

    app.logger.info("Lost-and-found service ready (variant=%s)", app.config['REPORT_VARIANT'])

    # Return the configured app
    return app
