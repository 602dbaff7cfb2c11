from flask import Blueprint

mpa_bp = Blueprint("mpa", __name__)

from . import views
