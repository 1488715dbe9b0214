"""
Flask Extensions

Extension instances are created here and bound to the app in create_app().
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_session import Session

# Database instance (users, posts and server-side sessions)
db = SQLAlchemy()

# Login manager for user authentication
login_manager = LoginManager()

# Server-side session store
sess = Session()
