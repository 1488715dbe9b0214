"""
Login Guard

Flask-Login hooks behind @login_required. When no user is signed in the
decorator returns unauthorized() instead of calling the view, so a
guarded view never runs without an identity.
"""

from urllib.parse import urlsplit

from flask import request, redirect, url_for, flash, session
from journal.extensions import db, login_manager
from journal.models import User

SIGN_IN_MESSAGE = 'You must be signed in first!'
RETURN_TO_KEY = 'return_to'


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))


@login_manager.unauthorized_handler
def unauthorized():
    """Remember where the visitor was going and send them to the login page."""
    session[RETURN_TO_KEY] = request.full_path.rstrip('?')
    flash(SIGN_IN_MESSAGE, 'error')
    return redirect(url_for('auth.login'))


def is_safe_return_path(target):
    """Only local absolute paths are valid post-login destinations."""
    if not target or not target.startswith('/') or target.startswith('//'):
        return False
    # Browsers read a backslash as a slash, so '/\\host' is '//host'
    if '\\' in target:
        return False
    parts = urlsplit(target)
    return not parts.scheme and not parts.netloc


def pop_return_to():
    """Take the saved destination out of the session, if it is safe."""
    target = session.pop(RETURN_TO_KEY, None)
    return target if is_safe_return_path(target) else None
