"""
WSGI Middleware

Browsers only submit forms with GET or POST. A POST carrying
``?_method=PUT`` (or PATCH/DELETE) in its query string is dispatched
as that method instead.
"""

from werkzeug.wrappers import Request


class MethodOverrideMiddleware:
    """Rewrite REQUEST_METHOD from the ``_method`` query parameter."""

    allowed_methods = frozenset(['PUT', 'PATCH', 'DELETE'])
    bodyless_methods = frozenset(['DELETE'])

    def __init__(self, app, param='_method'):
        self.app = app
        self.param = param

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            method = Request(environ).args.get(self.param, '').upper()
            if method in self.allowed_methods:
                environ['REQUEST_METHOD'] = method
                if method in self.bodyless_methods:
                    environ['CONTENT_LENGTH'] = '0'
        return self.app(environ, start_response)
