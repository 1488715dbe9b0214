"""
Auth Blueprint

Registration, login and logout, plus the Flask-Login hooks that guard
every @login_required view.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from journal.auth import guard, routes  # noqa: E402, F401
