"""
User Model
"""

from flask_login import UserMixin
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from journal.extensions import db
from journal.errors import RegistrationError


class User(UserMixin, db.Model):
    """User model for authentication"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())

    # Posts in the order they were written
    posts = db.relationship('Post', back_populates='author', order_by='Post.id',
                            lazy=True, cascade='all, delete-orphan')

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    @classmethod
    def register(cls, username, email, password):
        """Create and commit a new user.

        Raises:
            RegistrationError: if a field is missing or the username or
                email is taken. Nothing is left in the database.
        """
        username = (username or '').strip()
        email = (email or '').strip()

        if not username:
            raise RegistrationError('No username was given')
        if not email or '@' not in email:
            raise RegistrationError('Please provide a valid email address')
        if not password:
            raise RegistrationError('No password was given')

        if cls.query.filter_by(username=username).first():
            raise RegistrationError('A user with the given username is already registered')
        if cls.query.filter_by(email=email).first():
            raise RegistrationError('A user with the given email is already registered')

        user = cls(username=username, email=email)
        user.set_password(password)
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration
            db.session.rollback()
            raise RegistrationError('A user with the given username or email is already registered')
        except Exception:
            db.session.rollback()
            raise
        return user

    @classmethod
    def authenticate(cls, username, password):
        """Return the user for valid credentials, otherwise None."""
        user = cls.query.filter_by(username=(username or '').strip()).first()
        if user and password and user.check_password(password):
            return user
        return None

    def __repr__(self):
        return f'<User {self.username}>'
