from sqlalchemy import func
from lostfound import db


class VerificationCode(db.Model):
    """One row per issued code; rows are never consumed or deleted."""
    __tablename__ = 'verification_codes'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), nullable=False, index=True)
    otp_code = db.Column(db.Integer, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False, index=True)
    created_at = db.Column(db.DateTime, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<VerificationCode email={self.email} expires_at={self.expires_at}>"
