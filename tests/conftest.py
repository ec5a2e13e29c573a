import io

import pytest
from PIL import Image

from config import TestingConfig
from lostfound import create_app, db
from lostfound.reports.services import seed_categories


def _build_app(tmp_path, **overrides):
    overrides.setdefault('UPLOAD_FOLDER', str(tmp_path / 'uploads'))
    app = create_app(TestingConfig, overrides)
    with app.app_context():
        db.create_all()
        seed_categories(db.session)
    return app


@pytest.fixture
def app(tmp_path):
    app = _build_app(tmp_path)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def phone_app(tmp_path):
    app = _build_app(tmp_path, REPORT_VARIANT='phone')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def phone_client(phone_app):
    return phone_app.test_client()


@pytest.fixture
def png_bytes():
    buffer = io.BytesIO()
    Image.new('RGB', (4, 4), color=(200, 30, 30)).save(buffer, format='PNG')
    return buffer.getvalue()
