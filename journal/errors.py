"""
Error Handling

Every exception raised by a view ends up in one handler that renders
error.html with a status code and a human-readable message.
"""

from flask import render_template
from werkzeug.exceptions import HTTPException

DEFAULT_MESSAGE = 'Oh No, Something Went Wrong!'


class JournalError(Exception):
    """Application error carrying a status code for the error page."""

    status_code = 500

    def __init__(self, message=None, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class RegistrationError(JournalError):
    """Raised when an account cannot be created."""

    status_code = 400


def register_error_handlers(app):
    """Attach the catch-all error handler to the app."""

    @app.errorhandler(Exception)
    def handle_error(err):
        if isinstance(err, HTTPException):
            # Routing redirects (e.g. missing trailing slash) are not errors
            if err.code is not None and err.code < 400:
                return err
            status_code = err.code or 500
            message = err.description
            if status_code == 404:
                app.logger.warning('Not found: %s', err.description)
        elif isinstance(err, JournalError):
            status_code = err.status_code
            message = err.message
            app.logger.warning('%s (%s): %s', type(err).__name__, status_code, message)
        else:
            status_code = 500
            message = None
            app.logger.exception('Unhandled error: %s', err)

        if not message:
            message = DEFAULT_MESSAGE
        return render_template('error.html', status_code=status_code, message=message), status_code
