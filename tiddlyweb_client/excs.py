"""
tiddlyweb_client.excs - Exceptions raised by the client.

To catch a failed request:

..code-block:: python

    try:
        client.put_page('HelloThere', 'new text')
    except tw.RequestFailed as exc:
        if exc.status == 412:
            print('Someone else edited the page first')
        else:
            raise

Malformed JSON in a structured response raises ``DecodeError``, which
does NOT inherit from ``RequestFailed``: the request itself succeeded.
"""

__all__ = [
    'TiddlyWebError',
    'ConfigurationError',
    'UnknownRoute',
    'RequestFailed',
    'DecodeError',
]

class TiddlyWebError(Exception):
    """Base class for everything raised by tiddlyweb_client."""
    pass

class ConfigurationError(TiddlyWebError):
    """The client is missing configuration it needs, such as the server."""
    pass

class UnknownRoute(TiddlyWebError, KeyError):
    """No URI template is registered under the requested name."""
    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return 'unknown route: {!r}'.format(self.name)

class RequestFailed(TiddlyWebError):
    """The server answered with a status the operation does not accept.

    ``status`` is the HTTP status code, ``body`` the response text and
    ``response`` the full response (may be None).
    """
    def __init__(self, status, body, response=None):
        super().__init__(status, body)
        self.status = status
        self.body = body
        self.response = response

    def __str__(self):
        return '{}: {}'.format(self.status, self.body)

class DecodeError(TiddlyWebError, ValueError):
    """A structured response body was not valid JSON."""
    def __init__(self, body, reason=None):
        super().__init__(body, reason)
        self.body = body
        self.reason = reason

    def __str__(self):
        return 'could not decode JSON ({}): {!r}'.format(self.reason,
                                                         self.body[:80])
