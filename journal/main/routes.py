from flask import render_template
from journal.main import main_bp


@main_bp.route('/')
def index():
    """Landing page"""
    return render_template('start.html')


@main_bp.route('/about')
def about():
    return render_template('about.html')
