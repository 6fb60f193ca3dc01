"""
A simple client for TiddlyWeb servers.

Reads and writes pages (tiddlers), lists pages, revisions, workspaces
(recipes) and bags, and searches, over the TiddlyWeb HTTP API.

Requires the ``requests`` library.

http://tiddlyweb.com/

Installation
============

To install the latest development version::

    git clone <repository url> tiddlyweb-client
    cd tiddlyweb-client
    pip install -e .

Example Usage
=============

.. code-block:: python

    import tiddlyweb_client as tw

Get a page:

.. code-block:: python

    client = tw.Client(server="http://0.0.0.0:8080",
                       username="alice", password=password)

    client.workspace = "default"

    text = client.get_page("HelloThere")

Edit page:

.. code-block:: python

    # Reading first makes the write conditional on the page's ETag
    text = client.get_page("HelloThere")

    # Change and submit
    client.put_page("HelloThere", text + "\\n This is a test!")

Work with tags and fields:

.. code-block:: python

    client.accept = tw.STRUCTURED

    page = client.get_page("HelloThere")
    page["tags"].append("greeting")

    client.put_page("HelloThere", tw.Page(page["text"], tags=page["tags"],
                                          fields=page.get("fields")))

List pages, newest first:

.. code-block:: python

    client.config.order = "-modified"
    for title in client.list_pages():
        print(title)

Catch a lost update:

.. code-block:: python

    try:
        client.put_page("HelloThere", "new text")
    except tw.RequestFailed as exc:
        if exc.status != 412:
            raise
        print("Someone else edited HelloThere first")

MIT Licensed.
"""

__version__ = '0.1.0'

from .excs import (TiddlyWebError, ConfigurationError, UnknownRoute,
                   RequestFailed, DecodeError)
from .config import Config, STRUCTURED, DEFAULT_ACCEPT
from .page import Page
from .misc import name_to_id, EtagCache, file_sink
from .routes import ROUTES, make_uri, extend_uri
from .request import build_request
from .client import Client

__all__ = [
    'TiddlyWebError',
    'ConfigurationError',
    'UnknownRoute',
    'RequestFailed',
    'DecodeError',
    'Config',
    'STRUCTURED',
    'DEFAULT_ACCEPT',
    'Page',
    'name_to_id',
    'EtagCache',
    'file_sink',
    'ROUTES',
    'make_uri',
    'extend_uri',
    'build_request',
    'Client',
]
