import pytest

from lostfound.reports.validators import validate_report
from tests.helpers import valid_fields

OTP_ORDER = [
    'reporter_name', 'reporter_email', 'category_id', 'item_name',
    'description', 'date_event', 'location', 'otp_code', 'identification_number',
]


def phone_fields(**overrides):
    fields = valid_fields(reporter_phone='081234567890')
    del fields['reporter_email']
    del fields['otp_code']
    fields.update(overrides)
    return fields


def test_valid_submission_passes():
    assert validate_report(valid_fields(), 'otp') is None


@pytest.mark.parametrize('index', range(len(OTP_ORDER)))
def test_first_missing_field_is_reported(index):
    # Blank this field and every later one; the earliest blank must win
    fields = valid_fields(**{name: '' for name in OTP_ORDER[index:]})
    error = validate_report(fields, 'otp')
    assert error.field == OTP_ORDER[index]


def test_everything_missing_reports_name():
    error = validate_report({}, 'otp')
    assert error.field == 'reporter_name'
    assert error.message == "Nama wajib diisi."


def test_whitespace_only_counts_as_missing():
    error = validate_report(valid_fields(item_name='   '), 'otp')
    assert error.field == 'item_name'


@pytest.mark.parametrize('id_number, accepted', [
    ('1234567890', False),
    ('12345678901', True),
    ('123456789012', False),
])
def test_mahasiswa_needs_eleven_characters(id_number, accepted):
    error = validate_report(valid_fields(reporter_status='mahasiswa', identification_number=id_number), 'otp')
    if accepted:
        assert error is None
    else:
        assert error.field == 'identification_number'
        assert error.message == "NIM Mahasiswa wajib 11 digit angka!"


@pytest.mark.parametrize('id_number, accepted', [
    ('1' * 15, False),
    ('1' * 16, True),
    ('1' * 17, False),
])
def test_lainnya_needs_sixteen_characters(id_number, accepted):
    error = validate_report(valid_fields(reporter_status='lainnya', identification_number=id_number), 'otp')
    assert (error is None) == accepted


def test_length_rule_does_not_require_digits():
    assert validate_report(valid_fields(identification_number='abcdefghijk'), 'otp') is None


@pytest.mark.parametrize('status', ['dosen', 'tendik'])
@pytest.mark.parametrize('id_number, accepted', [
    ('1234', False),
    ('12345', True),
    ('1' * 20, True),
    ('1' * 21, False),
])
def test_staff_id_length_range(status, id_number, accepted):
    error = validate_report(valid_fields(reporter_status=status, identification_number=id_number), 'otp')
    assert (error is None) == accepted


def test_foreign_student_needs_five_or_more():
    short = validate_report(valid_fields(reporter_status='foreign_student', identification_number='A123'), 'otp')
    assert short.message == "Passport Number terlalu pendek."
    long_passport = 'A' * 40
    assert validate_report(valid_fields(reporter_status='foreign_student', identification_number=long_passport), 'otp') is None


def test_unknown_status_has_no_length_rule():
    assert validate_report(valid_fields(reporter_status='alumni', identification_number='1'), 'otp') is None


def test_missing_id_is_reported_before_length():
    error = validate_report(valid_fields(identification_number=''), 'otp')
    assert error.message == "Nomor identitas wajib diisi."


class TestPhoneVariant:

    def test_valid_submission_passes(self):
        assert validate_report(phone_fields(), 'phone') is None

    def test_email_and_otp_are_not_required(self):
        fields = phone_fields()
        assert 'reporter_email' not in fields
        assert validate_report(fields, 'phone') is None

    @pytest.mark.parametrize('phone, accepted', [
        ('0812345678901', True),
        ('1812345678901', False),
        ('081234567890123', False),
    ])
    def test_phone_shape(self, phone, accepted):
        error = validate_report(phone_fields(reporter_phone=phone), 'phone')
        if accepted:
            assert error is None
        else:
            assert error.field == 'reporter_phone'

    def test_phone_checked_before_category(self):
        error = validate_report(phone_fields(reporter_phone='', category_id=''), 'phone')
        assert error.field == 'reporter_phone'

    @pytest.mark.parametrize('status', ['dosen', 'tendik', 'foreign_student'])
    def test_staff_rules_do_not_apply(self, status):
        assert validate_report(phone_fields(reporter_status=status, identification_number='1'), 'phone') is None

    def test_mahasiswa_rule_still_applies(self):
        error = validate_report(phone_fields(identification_number='123'), 'phone')
        assert error.field == 'identification_number'
