from dataclasses import dataclass
from datetime import date
from typing import Optional

from flask_wtf import FlaskForm
from flask_wtf.file import FileAllowed, FileField
from PIL import Image, UnidentifiedImageError
from wtforms import DateField, SelectField, StringField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional as OptionalValue
from wtforms.validators import ValidationError as WTFValidationError

from lostfound.constants import ALLOWED_EXTENSIONS, CATEGORIES, ID_NUMBER_LIMIT, NAME_LIMIT, STATUS_LIMIT
from lostfound.exceptions import ValidationError


def _is_image(form, field):
    upload = field.data
    if not upload or not getattr(upload, 'filename', None):
        return
    try:
        with Image.open(upload.stream) as image:
            image.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError):
        raise WTFValidationError("File yang diunggah bukan gambar yang valid.")
    finally:
        upload.stream.seek(0)


class ReportForm(FlaskForm):
    """Typed view of a report submission; runs after validate_report passed."""

    reporter_name = StringField(
        'Nama Pelapor',
        validators=[
            DataRequired(message="Nama wajib diisi."),
            Length(max=NAME_LIMIT, message=f"Nama maksimal {NAME_LIMIT} karakter.")
        ]
    )

    category_id = SelectField(
        'Kategori',
        coerce=int,
        choices=[(category['id'], category['name']) for category in CATEGORIES],
        validate_choice=True,
        validators=[DataRequired(message="Pilih kategori barang.")]
    )

    item_name = StringField(
        'Nama Barang',
        validators=[
            DataRequired(message="Nama barang wajib diisi."),
            Length(max=NAME_LIMIT, message=f"Nama barang maksimal {NAME_LIMIT} karakter.")
        ]
    )

    description = TextAreaField(
        'Deskripsi',
        validators=[DataRequired(message="Deskripsi wajib diisi.")]
    )

    date_event = DateField(
        'Tanggal',
        format='%Y-%m-%d',
        validators=[DataRequired(message="Format tanggal tidak valid (YYYY-MM-DD).")]
    )

    location = StringField(
        'Lokasi',
        validators=[
            DataRequired(message="Lokasi wajib diisi."),
            Length(max=255, message="Lokasi maksimal 255 karakter.")
        ]
    )

    reporter_status = StringField(
        'Status Pelapor',
        validators=[
            OptionalValue(),
            Length(max=STATUS_LIMIT, message=f"Status pelapor maksimal {STATUS_LIMIT} karakter.")
        ]
    )

    identification_number = StringField(
        'Nomor Identitas',
        validators=[
            DataRequired(message="Nomor identitas wajib diisi."),
            Length(max=ID_NUMBER_LIMIT, message=f"Nomor identitas maksimal {ID_NUMBER_LIMIT} karakter.")
        ]
    )

    item_image = FileField(
        'Foto Barang',
        validators=[
            OptionalValue(),
            FileAllowed(sorted(ALLOWED_EXTENSIONS), "Hanya file gambar yang diperbolehkan (jpg, png, gif, webp)."),
            _is_image,
        ]
    )

    # WTForms reports coercion failures in English before our validators run
    COERCION_MESSAGES = {
        'category_id': "Kategori tidak dikenal.",
        'date_event': "Format tanggal tidak valid (YYYY-MM-DD).",
    }

    def first_error(self) -> Optional[ValidationError]:
        """First field error in declaration order, mirroring the page layout."""
        for field in self:
            if field.errors:
                message = self.COERCION_MESSAGES.get(field.name, field.errors[0])
                return ValidationError(field.name, message)
        return None


def _text(value):
    return '' if value is None else str(value).strip()


@dataclass
class ReportSubmission:
    reporter_name: str
    reporter_status: str
    identification_number: str
    reporter_contact: str
    category_id: int
    item_name: str
    description: str
    location: str
    date_event: date
    otp_code: Optional[str] = None

    @classmethod
    def from_form(cls, form, contact, otp_code=None):
        return cls(
            reporter_name=_text(form.reporter_name.data),
            reporter_status=_text(form.reporter_status.data),
            identification_number=_text(form.identification_number.data),
            reporter_contact=contact,
            category_id=form.category_id.data,
            item_name=_text(form.item_name.data),
            description=_text(form.description.data),
            location=_text(form.location.data),
            date_event=form.date_event.data,
            otp_code=otp_code,
        )
