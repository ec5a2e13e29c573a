import secrets
from datetime import timedelta

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from lostfound.exceptions import StorageError, VerificationError
from lostfound.functions import utcnow
from lostfound.verification.models import VerificationCode

OTP_MIN = 100000
OTP_MAX = 999999
OTP_LENGTH = 6


def generate_otp():
    return OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1)


class VerificationIssuer:
    """Issues and checks one-time email codes.

    Codes stay valid until they expire, even after a successful check, and
    several live codes may exist for the same address.
    """

    def __init__(self, session, ttl=timedelta(minutes=5), clock=utcnow):
        self.session = session
        self.ttl = ttl
        self.clock = clock

    def issue(self, email):
        email = (email or '').strip()
        if not email:
            raise VerificationError('email', "Email tidak boleh kosong.")

        code = generate_otp()
        record = VerificationCode(email=email, otp_code=code, expires_at=self.clock() + self.ttl)
        try:
            self.session.add(record)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            current_app.logger.exception("Failed to store verification code for %s", email)
            raise StorageError("Database Error")

        current_app.logger.info("Issued verification code for %s", email)
        return code

    def check(self, email, code):
        email = (email or '').strip()
        code = str(code or '').strip()
        if not email or not code:
            raise VerificationError('otp_code', "Email dan Kode OTP wajib diisi.")
        if not (code.isascii() and code.isdigit() and len(code) == OTP_LENGTH):
            return False

        try:
            match = (
                self.session.query(VerificationCode.id)
                .filter(
                    VerificationCode.email == email,
                    VerificationCode.otp_code == int(code),
                    VerificationCode.expires_at > self.clock(),
                )
                .first()
            )
        except SQLAlchemyError:
            self.session.rollback()
            current_app.logger.exception("Failed to look up verification code for %s", email)
            raise StorageError("Database Error saat verifikasi OTP.")

        return match is not None


def issuer_for_app(session):
    """Issuer configured from the current app's OTP settings."""
    return VerificationIssuer(session, ttl=timedelta(minutes=current_app.config['OTP_TTL_MINUTES']))
