from lostfound.constants import GENERAL_ERROR_MESSAGE


class FieldError(Exception):
    """A submission problem tied to one form field, reported back as JSON."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")

    def to_dict(self) -> dict:
        return {'field': self.field, 'message': self.message}


class ValidationError(FieldError):
    pass


class VerificationError(FieldError):
    pass


class StorageError(FieldError):
    def __init__(self, message: str = GENERAL_ERROR_MESSAGE):
        super().__init__('general', message)
