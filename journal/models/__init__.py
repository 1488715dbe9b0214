"""
Models Package

Exports all models for easy importing.
"""

from journal.models.user import User
from journal.models.post import Post

__all__ = ['User', 'Post']
