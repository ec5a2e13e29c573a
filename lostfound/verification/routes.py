from flask import current_app, jsonify

from lostfound import db
from lostfound.exceptions import FieldError
from lostfound.functions import request_value, submitted_data
from lostfound.verification import verification
from lostfound.verification.services import issuer_for_app


@verification.route('/api/send-otp', methods=['POST'])
def send_otp():
    email = request_value(submitted_data(), 'email')
    try:
        code = issuer_for_app(db.session).issue(email)
    except FieldError as e:
        return jsonify({'success': False, 'message': e.message})

    response = {'success': True, 'message': "Kode OTP terkirim!"}
    # Echoing the code is a development aid only
    if current_app.config['OTP_DEBUG_ECHO']:
        response['debug_otp'] = code
    return jsonify(response)


@verification.route('/api/verify-otp', methods=['POST'])
def verify_otp():
    data = submitted_data()
    try:
        valid = issuer_for_app(db.session).check(request_value(data, 'email'), request_value(data, 'otp_code'))
    except FieldError as e:
        return jsonify({'success': False, 'message': e.message})

    if valid:
        return jsonify({'success': True, 'message': "Kode Valid!"})
    return jsonify({'success': False, 'message': "Kode Salah atau sudah Kadaluarsa."})
