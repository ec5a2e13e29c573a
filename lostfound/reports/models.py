from sqlalchemy import func, Index, CheckConstraint
from lostfound import db
from lostfound.constants import CONTACT_LIMIT, ID_NUMBER_LIMIT, STATUS_LIMIT
import enum


# ---------- Enums ---------- #
class ReportType(enum.Enum):
    FOUND = 'found'
    LOST = 'lost'


class ReportStatus(enum.Enum):
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'


# ---------- Category ---------- #
class Category(db.Model):
    __tablename__ = 'categories'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(80), nullable=False, unique=True)

    reports = db.relationship('Report', back_populates='category', lazy='select')

    def __repr__(self):
        return f"<Category id={self.id} name={self.name}>"


# ---------- Report ---------- #
class Report(db.Model):
    __tablename__ = 'reports'

    __table_args__ = (
        Index('ix_reports_type_status', 'type', 'status'),
        Index('ix_reports_date_created', 'date_event', 'created_at'),
        CheckConstraint("type IN ('found', 'lost')", name='ck_reports_valid_type'),
        CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')",
            name='ck_reports_valid_status'
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    category_id = db.Column(db.Integer, db.ForeignKey('categories.id', ondelete='RESTRICT'), nullable=False, index=True)
    type = db.Column(db.String(10), nullable=False)
    status = db.Column(db.String(20), nullable=False, default=ReportStatus.PENDING.value)

    reporter_name = db.Column(db.String(150), nullable=False)
    reporter_status = db.Column(db.String(STATUS_LIMIT), nullable=False)
    identification_number = db.Column(db.String(ID_NUMBER_LIMIT), nullable=False)
    # Email for the OTP flow, phone number for the phone flow
    reporter_contact = db.Column(db.String(CONTACT_LIMIT), nullable=False)

    item_name = db.Column(db.String(150), nullable=False, index=True)
    description = db.Column(db.Text, nullable=False)
    location = db.Column(db.String(255), nullable=False)
    date_event = db.Column(db.Date, nullable=False)
    image_path = db.Column(db.String(512), nullable=True)
    access_token = db.Column(db.String(32), nullable=False, unique=True)

    created_at = db.Column(db.DateTime, server_default=func.now(), nullable=False)

    category = db.relationship('Category', back_populates='reports', lazy='joined')

    def __repr__(self):
        return f"<Report id={self.id} type={self.type} item_name={self.item_name!r} status={self.status}>"

    @property
    def category_name(self):
        return self.category.name if self.category else None
