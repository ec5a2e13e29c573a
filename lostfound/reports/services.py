import secrets
import string

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import contains_eager

from lostfound.constants import ACCESS_TOKEN_LENGTH, CATEGORIES
from lostfound.exceptions import StorageError
from lostfound.reports.models import Category, Report, ReportStatus, ReportType

BASE36_ALPHABET = string.digits + string.ascii_lowercase


def generate_access_token(length=ACCESS_TOKEN_LENGTH):
    return ''.join(secrets.choice(BASE36_ALPHABET) for _ in range(length))


def seed_categories(session):
    """Insert the static category rows that are missing. Returns how many were added."""
    existing = {category_id for (category_id,) in session.query(Category.id)}
    added = 0
    for category_data in CATEGORIES:
        if category_data['id'] in existing:
            continue
        session.add(Category(id=category_data['id'], name=category_data['name']))
        added += 1
    session.commit()
    return added


class ReportStore:
    """Reads and writes reports through the session it is given."""

    def __init__(self, session):
        self.session = session

    def submit(self, report_type, submission, image_path=None):
        """Insert a pending report and return its access token.

        Raises StorageError when the database rejects the insert; the cause
        is logged, not returned.
        """
        if report_type not in (ReportType.FOUND.value, ReportType.LOST.value):
            raise ValueError(f"Unknown report type: {report_type}")

        access_token = generate_access_token()
        report = Report(
            category_id=submission.category_id,
            type=report_type,
            status=ReportStatus.PENDING.value,
            reporter_name=submission.reporter_name,
            reporter_status=submission.reporter_status,
            identification_number=submission.identification_number,
            reporter_contact=submission.reporter_contact,
            item_name=submission.item_name,
            description=submission.description,
            location=submission.location,
            date_event=submission.date_event,
            image_path=image_path,
            access_token=access_token,
        )
        try:
            self.session.add(report)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            current_app.logger.exception("Failed to store %s report for %s", report_type, submission.reporter_contact)
            raise StorageError()

        current_app.logger.info("Stored %s report id=%s item=%r", report_type, report.id, report.item_name)
        return access_token

    def list_found(self, search=None, category=None):
        """Visible found reports, newest event first."""
        query = (
            self.session.query(Report)
            .outerjoin(Category, Report.category_id == Category.id)
            .options(contains_eager(Report.category))
            .filter(
                Report.type == ReportType.FOUND.value,
                Report.status != ReportStatus.REJECTED.value,
            )
        )

        if search:
            query = query.filter(Report.item_name.contains(search, autoescape=True))

        if category is not None:
            query = query.filter(Report.category_id == category)

        return query.order_by(Report.date_event.desc(), Report.created_at.desc()).all()
