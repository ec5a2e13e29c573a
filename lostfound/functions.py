from datetime import datetime, timezone

from flask import request
from werkzeug.datastructures import CombinedMultiDict, MultiDict


def utcnow():
    """Naive UTC timestamp, matching how DateTime columns are stored."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def submitted_data():
    """Submitted fields of the current request as a string MultiDict.

    JSON objects are flattened to strings; any other JSON body counts as empty.
    """
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return MultiDict()
        return MultiDict({key: '' if value is None else str(value) for key, value in payload.items()})
    return request.form


def form_data(data):
    """Fields plus uploaded files, in the shape Flask-WTF expects."""
    if request.files:
        return CombinedMultiDict([request.files, data])
    return data


def request_value(data, name):
    """Read a submitted value as a stripped string ('' when absent)."""
    value = data.get(name) if hasattr(data, 'get') else None
    if value is None:
        return ''
    return str(value).strip()
