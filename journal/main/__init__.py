"""
Main Blueprint

Public pages that need no login.
"""

from flask import Blueprint

main_bp = Blueprint('main', __name__)

from journal.main import routes  # noqa: E402, F401
