"""
Posts Blueprint

A user's own journal entries. Every view requires a login and every
lookup is restricted to posts the current user wrote.
"""

from flask import Blueprint

posts_bp = Blueprint('posts', __name__)

from journal.posts import routes  # noqa: E402, F401
