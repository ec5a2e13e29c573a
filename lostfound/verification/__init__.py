from flask import Blueprint

verification = Blueprint('verification', __name__)

from . import routes  # noqa: E402,F401
