from datetime import date, datetime, timedelta

from lostfound import db
from lostfound.functions import utcnow
from lostfound.reports.models import Report
from lostfound.reports.services import generate_access_token
from lostfound.verification.models import VerificationCode


def valid_fields(**overrides):
    fields = {
        'reporter_name': 'Siti Aminah',
        'reporter_email': 'siti@example.ac.id',
        'reporter_status': 'mahasiswa',
        'identification_number': '12345678901',
        'category_id': '1',
        'item_name': 'Laptop Asus',
        'description': 'Laptop abu-abu dengan stiker kampus',
        'date_event': '2024-03-01',
        'location': 'Perpustakaan lantai 2',
        'otp_code': '123456',
    }
    fields.update(overrides)
    return fields


def add_code(email, code, expires_in=timedelta(minutes=5)):
    record = VerificationCode(email=email, otp_code=code, expires_at=utcnow() + expires_in)
    db.session.add(record)
    db.session.commit()
    return record


def add_report(**overrides):
    values = {
        'category_id': 1,
        'type': 'found',
        'status': 'pending',
        'reporter_name': 'Budi',
        'reporter_status': 'mahasiswa',
        'identification_number': '12345678901',
        'reporter_contact': 'budi@example.ac.id',
        'item_name': 'Barang',
        'description': 'Deskripsi',
        'location': 'Kantin',
        'date_event': date(2024, 3, 1),
        'access_token': generate_access_token(),
        'created_at': datetime(2024, 3, 1, 12, 0, 0),
    }
    values.update(overrides)
    report = Report(**values)
    db.session.add(report)
    db.session.commit()
    return report
