"""
See the Client docstrings.
"""
import logging

import requests

from .config import Config, STRUCTURED, DEFAULT_ACCEPT
from .misc import EtagCache, name_to_id
from .page import Page
from .request import build_request
from .response import interpret_page_get, interpret_page_put, interpret_things
from .routes import make_uri, extend_uri

__all__ = [
    'Client',
]

logger = logging.getLogger(__name__)

class Client(object):
    """A connection to one TiddlyWeb server.

    Settings live in ``self.config`` (a Config). Keyword arguments not
    consumed by the Client itself are used to build that Config::

        client = Client(server='http://0.0.0.0:8080', workspace='default',
                        username='alice', password='secret')

    ``session`` is the transport: a ``requests.Session`` by default, or
    anything with the same ``prepare_request`` and ``send`` methods.
    ``diagnostics`` is an optional callable receiving ``(label, data)``
    dumps of every request and response.

    A Client sends one request at a time and is not safe to share
    between threads without a lock around each call.
    """

    def __init__(self, config=None, session=None, diagnostics=None,
                 **settings):
        """Initialize a client from a Config and/or settings."""
        if config is None:
            config = Config(**settings)
        elif settings:
            config = config.copy(**settings)
        self.config = config
        self.etags = EtagCache()
        self.diagnostics = diagnostics
        self.last_response = None
        self._session = session if session is not None else requests.session()

    def __repr__(self):
        """Represent a Client."""
        return '<Client for {srv} workspace {ws}>'.format(
            srv=self.config.server, ws=self.config.workspace)

    __str__ = __repr__

    @property
    def workspace(self):
        """The workspace (recipe) pages are read from and written to."""
        return self.config.workspace

    @workspace.setter
    def workspace(self, value):
        self.config.workspace = value

    @property
    def accept(self):
        """The media type asked for; None means text/plain."""
        return self.config.accept

    @accept.setter
    def accept(self, value):
        self.config.accept = value

    name_to_id = staticmethod(name_to_id)

    def _dump(self, label, data):
        if self.diagnostics is not None:
            self.diagnostics(label, data)

    def request(self, method, uri, accept=None, content_type=None,
                content=None, if_match=None):
        #pylint: disable=too-many-arguments
        """Send one request for ``uri`` (a path below the server).

        Returns the ``requests.Response``, which is also kept as
        ``self.last_response``. Redirects are not followed.
        """
        req = build_request(self.config, method, uri, accept=accept,
                            content_type=content_type, content=content,
                            if_match=if_match)
        prepared = self._session.prepare_request(req)
        if req.auth is None:
            # no netrc credentials from the session
            prepared.headers.pop('Authorization', None)

        if self.config.verbose:
            logger.info('uri: %s', prepared.url)
        logger.debug('%s %s', prepared.method, prepared.url)
        self._dump('request', {
            'method': prepared.method,
            'url': prepared.url,
            'headers': dict(prepared.headers),
            'body': prepared.body,
        })

        response = self._session.send(prepared, allow_redirects=False)
        if 'charset' not in response.headers.get('Content-Type', '').lower():
            response.encoding = 'utf-8'
        self.last_response = response

        if self.config.http_header_debug:
            logger.info('Code: %s %r', response.status_code,
                        dict(response.headers))
        logger.debug('%s %s -> %s', prepared.method, prepared.url,
                     response.status_code)
        self._dump('response', {
            'status': response.status_code,
            'headers': dict(response.headers),
        })
        return response

    @staticmethod
    def _wire_accept(accept):
        return 'application/json' if accept == STRUCTURED else accept

    def get_page(self, name, accept=None):
        """Retrieve a page of the current workspace.

        ``accept`` overrides the configured accept type for this call.
        The page's ETag is remembered for the next ``put_page``.
        """
        accept = accept or self.config.accept or DEFAULT_ACCEPT
        page_id = name_to_id(name)
        workspace = self.config.workspace
        uri = make_uri('page', {'pname': page_id, 'ws': workspace})
        if self.config.json_verbose:
            uri += '?verbose=1'

        response = self.request('GET', uri, accept=self._wire_accept(accept))
        if response.status_code in (200, 404):
            self.etags.record(workspace, page_id,
                              response.headers.get('ETag'))
        return interpret_page_get(response, structured=accept == STRUCTURED)

    def put_page(self, name, content):
        """Save a page in the current workspace.

        ``content`` is either text, sent as text/plain, or a Page (or a
        dict with ``content``, ``tags``, ``fields`` and ``bag`` keys),
        sent as JSON. A Page with a bag is written into that bag. If the
        page was read earlier, the write is conditional on its ETag.
        """
        if isinstance(content, dict):
            content = Page.from_dict(content)

        bag = None
        content_type = 'text/plain'
        if isinstance(content, Page):
            content_type = 'application/json'
            bag = content.bag
            content = content.to_json()

        workspace = self.config.workspace
        if bag:
            uri = make_uri('page', {'pname': name, 'ws': bag, 'type': 'bags'})
        else:
            uri = make_uri('page', {'pname': name, 'ws': workspace})

        if_match = self.etags.lookup(workspace, name_to_id(name))
        logger.debug('if_match %s', if_match)

        response = self.request('PUT', uri, content_type=content_type,
                                content=content, if_match=if_match)
        return interpret_page_put(response)

    def _get_things(self, route, as_list=True, query=None, **replacements):
        """Centralize listing and metadata requests."""
        accept = self.config.accept or DEFAULT_ACCEPT
        values = {'ws': self.config.workspace}
        values.update(replacements)
        uri = make_uri(route, values)
        uri = extend_uri(uri, filter=self.config.filter,
                         query=self.config.query, order=self.config.order,
                         count=self.config.count, extra=query)

        response = self.request('GET', uri, accept=self._wire_accept(accept))
        return interpret_things(response, structured=self.config.structured,
                                as_list=as_list)

    def list_pages(self, as_list=True, **query):
        """List the pages in the current workspace.

        Keyword arguments are added to the query string.
        """
        return self._get_things('pages', as_list=as_list, query=query)

    def list_revisions(self, name, as_list=True):
        """List the revisions of a page."""
        return self._get_things('revisions', as_list=as_list,
                                pname=name_to_id(name))

    def search(self, query=None, as_list=True):
        """Search the server.

        ``query`` is sent as ``q`` in addition to any configured query.
        """
        extra = {'q': query} if query else None
        return self._get_things('search', as_list=as_list, query=extra)

    def get_workspace(self, workspace=None):
        """Return the metadata of a workspace, by default the current one.

        The current workspace is left unchanged.
        """
        previous = self.config.workspace
        if workspace:
            self.config.workspace = workspace
        try:
            return self._get_things('recipe', as_list=False)
        finally:
            self.config.workspace = previous

    def list_workspaces(self, as_list=True):
        """List all workspaces on the server."""
        return self._get_things('recipes', as_list=as_list)

    def get_bag(self, bag):
        """Return the metadata of a bag."""
        return self._get_things('bag', as_list=False, ws=bag)

    def list_bags(self, as_list=True):
        """List all bags on the server."""
        return self._get_things('bags', as_list=as_list)
