from flask import Blueprint

reports = Blueprint('reports', __name__)

from . import routes  # noqa: E402,F401
