"""
Configuration settings for Blog Journal
"""
import os
from datetime import timedelta

from dotenv import load_dotenv

from journal.extensions import db

load_dotenv()


class Config:
    """Flask application configuration"""

    # Flask secret key for signing sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or os.environ.get('DB_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'journal.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server-side sessions, stored next to users and posts
    SESSION_TYPE = 'sqlalchemy'
    SESSION_SQLALCHEMY = db
    SESSION_SQLALCHEMY_TABLE = 'sessions'
    SESSION_PERMANENT = True
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_REFRESH_EACH_REQUEST = True
    SESSION_COOKIE_NAME = 'session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Application settings
    SITE_NAME = 'Blog Journal'
    PORT = int(os.environ.get('PORT') or 3000)
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SESSION_TYPE = 'cachelib'
    LOG_LEVEL = 'WARNING'
