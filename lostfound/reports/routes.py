from flask import current_app, jsonify, render_template, request
from sqlalchemy.exc import SQLAlchemyError

from lostfound import db
from lostfound.constants import CATEGORIES, CONTACT_LIMIT
from lostfound.exceptions import FieldError, StorageError, ValidationError, VerificationError
from lostfound.functions import form_data, request_value, submitted_data
from lostfound.reports import reports
from lostfound.reports.forms import ReportForm, ReportSubmission
from lostfound.reports.services import ReportStore
from lostfound.reports.uploads import remove_upload, save_upload
from lostfound.reports.validators import validate_report
from lostfound.verification.services import issuer_for_app


def _failure(error):
    return jsonify({'success': False, **error.to_dict()})


def _handle_submission(report_type, success_message):
    variant = current_app.config['REPORT_VARIANT']
    data = submitted_data()

    # ===== FIELD RULES (before anything touches the disk) =====

    error = validate_report(data, variant)
    if error:
        current_app.logger.warning("Rejected %s report: %s", report_type, error)
        return _failure(error)

    form = ReportForm(formdata=form_data(data))
    if not form.validate_on_submit():
        error = form.first_error()
        current_app.logger.warning("Rejected %s report: %s", report_type, error)
        return _failure(error)

    contact_field = 'reporter_email' if variant == 'otp' else 'reporter_phone'
    if len(request_value(data, contact_field)) > CONTACT_LIMIT:
        return _failure(ValidationError(contact_field, f"Kontak maksimal {CONTACT_LIMIT} karakter."))

    otp_code = request_value(data, 'otp_code') if variant == 'otp' else None
    submission = ReportSubmission.from_form(form, request_value(data, contact_field), otp_code)

    image_path = None
    try:
        # ===== VERIFY OTP =====
        if variant == 'otp':
            if not issuer_for_app(db.session).check(submission.reporter_contact, otp_code):
                raise VerificationError('otp_code', "Kode OTP salah atau sudah kadaluarsa!")

        # ===== SAVE IMAGE & REPORT =====
        try:
            image_path = save_upload(form.item_image.data)
        except OSError:
            current_app.logger.exception("Failed to write uploaded image")
            raise StorageError()

        access_token = ReportStore(db.session).submit(report_type, submission, image_path)

    except FieldError as e:
        if isinstance(e, StorageError):
            remove_upload(image_path)
        current_app.logger.warning("Rejected %s report: %s", report_type, e)
        return _failure(e)

    return jsonify({'success': True, 'message': success_message, 'access_token': access_token})


@reports.route('/submit-penemuan', methods=['POST'])
def submit_found_report():
    return _handle_submission('found', "Laporan Penemuan Berhasil Disimpan!")


@reports.route('/submit-kehilangan', methods=['POST'])
def submit_lost_report():
    return _handle_submission('lost', "Laporan Kehilangan Berhasil Disimpan!")


@reports.route('/list-barang-temuan', methods=['GET'])
def list_found_items():
    search_query = request.args.get('search', '').strip()
    category_filter = request.args.get('category', '').strip()

    # Non-numeric category values are ignored rather than rejected
    category = int(category_filter) if category_filter.isdigit() else None

    try:
        found_reports = ReportStore(db.session).list_found(search=search_query or None, category=category)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Failed to load found reports")
        return 'Database Error', 500

    return render_template(
        'list-barang-temuan.html',
        active_page='list-barang-temuan',
        reports=found_reports,
        categories=CATEGORIES,
        search_query=search_query,
        category_filter=category_filter,
    )
