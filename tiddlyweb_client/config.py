"""
The Config object holding everything a Client needs to talk to a server.
"""
from .excs import ConfigurationError

__all__ = [
    'Config',
    'STRUCTURED',
    'DEFAULT_ACCEPT',
]

#: Accept type asking for pages and listings as decoded JSON.
STRUCTURED = 'perl_hash'
DEFAULT_ACCEPT = 'text/plain'

class Config(object):
    #pylint: disable=too-many-instance-attributes,too-few-public-methods
    """Connection and listing settings for a Client.

    ``server`` is the base URL. Authenticate either with ``username`` and
    ``password`` or with ``user_cookie``, the value of a TiddlyWeb
    ``tiddlyweb_user`` cookie; the cookie wins when both are set.
    ``cookie`` is an extra raw cookie string sent with every request.

    ``accept`` is the media type asked for; ``STRUCTURED`` asks for JSON
    and decodes it. ``filter``, ``query``, ``order`` and ``count`` are
    added to listing requests as ``select``, ``q``, ``sort`` and
    ``limit``.

    ``verbose`` logs each URL at INFO, ``http_header_debug`` logs each
    response's status and headers at INFO, and ``json_verbose`` asks the
    server for verbose JSON when reading pages.
    """
    FIELDS = (
        'server',
        'workspace',
        'username',
        'password',
        'user_cookie',
        'cookie',
        'accept',
        'filter',
        'query',
        'order',
        'count',
        'verbose',
        'http_header_debug',
        'json_verbose',
        'agent_string',
    )

    def __init__(self, server=None, workspace=None, username=None,
                 password=None, user_cookie=None, cookie=None, accept=None,
                 filter=None, query=None, order=None, count=None,
                 verbose=False, http_header_debug=False, json_verbose=False,
                 agent_string=None):
        #pylint: disable=too-many-arguments,too-many-locals,redefined-builtin
        """Initialize the configuration. Every setting is optional."""
        self.server = server
        self.workspace = workspace
        self.username = username
        self.password = password
        self.user_cookie = user_cookie
        self.cookie = cookie
        self.accept = accept
        self.filter = filter
        self.query = query
        self.order = order
        self.count = count
        self.verbose = verbose
        self.http_header_debug = http_header_debug
        self.json_verbose = json_verbose
        self.agent_string = agent_string

    def __repr__(self):
        """Represent the configuration, without the password."""
        shown = []
        for name in self.FIELDS:
            value = getattr(self, name)
            if value in (None, False):
                continue
            if name == 'password':
                value = '***'
            shown.append('{}={!r}'.format(name, value))
        return '<Config {}>'.format(' '.join(shown))

    __str__ = __repr__

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name)
                   for name in self.FIELDS)

    __hash__ = None

    def copy(self, **changes):
        """Return a copy of this configuration with ``changes`` applied."""
        values = {name: getattr(self, name) for name in self.FIELDS}
        values.update(changes)
        return type(self)(**values)

    def base_url(self):
        """Return the server URL without a trailing slash."""
        if not self.server:
            raise ConfigurationError('No server defined!')
        server = self.server
        if server.endswith('/'):
            server = server[:-1]
        return server

    @property
    def structured(self):
        """Whether responses should be decoded from JSON."""
        return self.accept == STRUCTURED
