"""
Post Model
"""

from journal.extensions import db


class Post(db.Model):
    """A journal entry, owned by exactly one user"""
    __tablename__ = 'posts'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, nullable=False)
    author_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())
    updated_at = db.Column(db.DateTime, default=db.func.current_timestamp(),
                           onupdate=db.func.current_timestamp())

    author = db.relationship('User', back_populates='posts')

    @classmethod
    def owned_by(cls, user_id):
        """Query restricted to posts written by ``user_id``."""
        return cls.query.filter_by(author_id=user_id)

    @classmethod
    def get_owned_or_404(cls, post_id, user_id):
        """Fetch a post by id, but only if ``user_id`` wrote it.

        Someone else's post and a missing post both give a 404.
        """
        return cls.owned_by(user_id).filter_by(id=post_id).first_or_404(
            description='That post does not exist.')

    def __repr__(self):
        return f'<Post {self.id} by User:{self.author_id}>'
