"""
Post Routes

Compose, read, edit and delete posts belonging to the current user.
"""

from flask import current_app, render_template, request, redirect, url_for, flash
from flask_login import login_required, current_user
from journal.extensions import db
from journal.models import Post
from journal.posts import posts_bp


def _read_post_form():
    """Return (title, content) from the submitted form, stripped."""
    title = request.form.get('postTitle', '').strip()
    content = request.form.get('postBody', '').strip()
    return title, content


@posts_bp.route('/home')
@login_required
def home():
    """List the current user's posts"""
    return render_template('home.html', posts=current_user.posts)


@posts_bp.route('/compose', methods=['GET', 'POST'])
@login_required
def compose():
    """Write a new post"""
    if request.method == 'POST':
        title, content = _read_post_form()
        if not title or not content:
            flash('A post needs both a title and some content.', 'error')
            return redirect(url_for('posts.compose'))

        post = Post(title=title, content=content)
        # Appending sets post.author; user and post are committed together
        current_user.posts.append(post)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        current_app.logger.info('User %s created post %s', current_user.username, post.id)
        return redirect(url_for('posts.home'))

    return render_template('compose.html')


@posts_bp.route('/posts/<int:post_id>')
@login_required
def show_post(post_id):
    post = Post.get_owned_or_404(post_id, current_user.id)
    return render_template('post.html', post=post)


@posts_bp.route('/posts/<int:post_id>/edit')
@login_required
def edit_post(post_id):
    post = Post.get_owned_or_404(post_id, current_user.id)
    return render_template('edit.html', post=post)


@posts_bp.route('/posts/<int:post_id>', methods=['PUT'])
@login_required
def update_post(post_id):
    """Apply an edit. Only title and content can change."""
    post = Post.get_owned_or_404(post_id, current_user.id)
    title, content = _read_post_form()
    if not title or not content:
        flash('A post needs both a title and some content.', 'error')
        return redirect(url_for('posts.edit_post', post_id=post.id))

    post.title = title
    post.content = content
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info('User %s updated post %s', current_user.username, post.id)
    flash('Post updated.', 'success')
    return redirect(url_for('posts.show_post', post_id=post.id))


@posts_bp.route('/posts/<int:post_id>', methods=['DELETE'])
@login_required
def delete_post(post_id):
    post = Post.get_owned_or_404(post_id, current_user.id)
    db.session.delete(post)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info('User %s deleted post %s', current_user.username, post_id)
    flash('Post deleted.', 'success')
    return redirect(url_for('main.index'))
