"""
Field rules for found/lost report submissions.

``validate_report`` walks the required fields in a fixed order and stops at
the first failure, so the page can highlight exactly one input. The order is
part of the contract: a submission missing several fields always reports the
earliest one.
"""
from typing import Mapping, Optional

from lostfound.constants import PHONE_MAX_LENGTH, PHONE_PREFIX
from lostfound.exceptions import ValidationError
from lostfound.functions import request_value

# (field, message) checked for presence after the contact field
ITEM_FIELDS = (
    ('category_id', "Pilih kategori barang."),
    ('item_name', "Nama barang wajib diisi."),
    ('description', "Deskripsi wajib diisi."),
    ('date_event', "Tanggal wajib diisi."),
    ('location', "Lokasi wajib diisi."),
)

# reporter_status -> (min length, max length or None, message)
EXACT_ID_RULES = {
    'mahasiswa': (11, 11, "NIM Mahasiswa wajib 11 digit angka!"),
    'lainnya': (16, 16, "NIK KTP wajib 16 digit angka!"),
}
STAFF_ID_RULES = {
    'dosen': (5, 20, "NIP/NIK Pegawai tidak valid."),
    'tendik': (5, 20, "NIP/NIK Pegawai tidak valid."),
    'foreign_student': (5, None, "Passport Number terlalu pendek."),
}


def identification_rule(reporter_status: str, variant: str):
    """Length rule for an identity type, or None when unconstrained."""
    if reporter_status in EXACT_ID_RULES:
        return EXACT_ID_RULES[reporter_status]
    if variant == 'otp':
        return STAFF_ID_RULES.get(reporter_status)
    return None


def _check_contact(fields, variant) -> Optional[ValidationError]:
    if variant == 'otp':
        if not request_value(fields, 'reporter_email'):
            return ValidationError('reporter_email', "Email wajib diisi.")
        return None

    phone = request_value(fields, 'reporter_phone')
    if not phone:
        return ValidationError('reporter_phone', "Nomor HP wajib diisi.")
    if not phone.startswith(PHONE_PREFIX):
        return ValidationError('reporter_phone', "Nomor HP harus diawali 08.")
    if len(phone) > PHONE_MAX_LENGTH:
        return ValidationError('reporter_phone', f"Nomor HP maksimal {PHONE_MAX_LENGTH} digit.")
    return None


def _check_identification(fields, variant) -> Optional[ValidationError]:
    id_number = request_value(fields, 'identification_number')
    if not id_number:
        return ValidationError('identification_number', "Nomor identitas wajib diisi.")

    rule = identification_rule(request_value(fields, 'reporter_status'), variant)
    if rule is None:
        return None

    min_length, max_length, message = rule
    length = len(id_number)
    if length < min_length or (max_length is not None and length > max_length):
        return ValidationError('identification_number', message)
    return None


def validate_report(fields: Mapping[str, str], variant: str = 'otp') -> Optional[ValidationError]:
    """Return the first failing field as a ValidationError, or None if valid."""
    if not request_value(fields, 'reporter_name'):
        return ValidationError('reporter_name', "Nama wajib diisi.")

    error = _check_contact(fields, variant)
    if error:
        return error

    for name, message in ITEM_FIELDS:
        if not request_value(fields, name):
            return ValidationError(name, message)

    if variant == 'otp' and not request_value(fields, 'otp_code'):
        return ValidationError('otp_code', "Kode OTP wajib diisi.")

    return _check_identification(fields, variant)
