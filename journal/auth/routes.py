"""
Auth Routes

User authentication routes using Flask-Login.
"""

from flask import current_app, render_template, request, redirect, url_for, flash
from flask_login import login_user, logout_user, current_user
from journal.auth import auth_bp
from journal.auth.guard import pop_return_to
from journal.errors import RegistrationError
from journal.models import User


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """User registration route"""
    if current_user.is_authenticated:
        return redirect(url_for('posts.home'))

    if request.method == 'POST':
        try:
            user = User.register(request.form.get('username'),
                                 request.form.get('email'),
                                 request.form.get('password'))
        except RegistrationError as e:
            current_app.logger.info('Registration rejected: %s', e.message)
            flash(e.message, 'error')
            return redirect(url_for('auth.register'))

        login_user(user)
        current_app.logger.info('Registered user %s', user.username)
        flash(f'Welcome to {current_app.config["SITE_NAME"]}!', 'success')
        return redirect(url_for('posts.home'))

    return render_template('register.html')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    if current_user.is_authenticated:
        return redirect(url_for('posts.home'))

    if request.method == 'POST':
        username = request.form.get('username', '')
        user = User.authenticate(username, request.form.get('password', ''))

        if user is None:
            current_app.logger.warning('Failed login for %r', username)
            flash('Password or username is incorrect', 'error')
            return redirect(url_for('auth.login'))

        login_user(user)
        current_app.logger.info('User %s signed in', user.username)
        flash(f'welcome back {user.username}!', 'success')
        return redirect(pop_return_to() or url_for('posts.home'))

    return render_template('login.html')


@auth_bp.route('/logout')
def logout():
    """User logout route"""
    if current_user.is_authenticated:
        current_app.logger.info('User %s signed out', current_user.username)
    logout_user()
    flash('Goodbye!', 'success')
    return redirect(url_for('main.index'))
