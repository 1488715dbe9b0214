"""
Blog Journal
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the journal package.
"""

from journal import create_app

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    port = app.config['PORT']
    app.logger.info('Server started on port %s', port)
    app.run(host='0.0.0.0', port=port)
