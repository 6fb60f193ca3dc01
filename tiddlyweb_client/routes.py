"""
URI templates for the TiddlyWeb HTTP API and the helpers that fill them in.

Placeholders look like ``/:name``. Substitution is plain text matching,
which is enough for this fixed set of routes.
"""
import re
from urllib.parse import quote

from .excs import UnknownRoute

__all__ = [
    'ROUTES',
    'DEFAULT_TYPE',
    'make_uri',
    'extend_uri',
]

BASE_URI = ''
DEFAULT_TYPE = 'recipes'

ROUTES = {
    'page': BASE_URI + '/:type/:ws/tiddlers/:pname',
    'pages': BASE_URI + '/:type/:ws/tiddlers',
    'revisions': BASE_URI + '/:type/:ws/pages/:pname/revisions',
    'recipe': BASE_URI + '/recipes/:ws',
    'recipes': BASE_URI + '/recipes',
    'bag': BASE_URI + '/bags/:ws',
    'bags': BASE_URI + '/bags',
    'search': BASE_URI + '/search',
}

def _escape(value):
    """Percent-encode a path segment as UTF-8, slashes included."""
    if isinstance(value, bytes):
        value = value.decode('utf-8')
    return quote(str(value), safe='')

def make_uri(name, replacements=None):
    """Fill in the route called ``name``.

    ``replacements`` maps placeholder names to values. ``type`` defaults
    to ``recipes`` and a None value fills in an empty segment. Only the
    first occurrence of each placeholder is replaced, and placeholders
    missing from ``replacements`` are left as they are.
    """
    try:
        uri = ROUTES[name]
    except KeyError:
        raise UnknownRoute(name) from None

    replacements = dict(replacements or {})
    if not replacements.get('type'):
        replacements['type'] = DEFAULT_TYPE

    for stub, value in replacements.items():
        if value is None:
            value = ''
        segment = '/' + _escape(value)
        uri = re.sub(r'/:' + re.escape(stub) + r'\b',
                     lambda _match: segment, uri, count=1)
    return uri

def extend_uri(uri, filter=None, query=None, order=None, count=None,
               extra=None):
    #pylint: disable=redefined-builtin,too-many-arguments
    """Append listing parameters to ``uri``.

    The configured ``filter``, ``query``, ``order`` and ``count`` become
    ``select``, ``q``, ``sort`` and ``limit``. ``extra`` is a mapping of
    further parameters for this call only. Pairs are joined with ``;``.
    """
    params = []
    if filter:
        params.append('select=' + str(filter))
    if query:
        params.append('q=' + str(query))
    if order:
        params.append('sort=' + str(order))
    if count:
        params.append('limit=' + str(count))
    if params:
        uri += '?' + ';'.join(params)

    if extra:
        more = ';'.join('{}={}'.format(key, value)
                        for key, value in extra.items())
        if more:
            uri += (';' if '?' in uri else '?') + more
    return uri
