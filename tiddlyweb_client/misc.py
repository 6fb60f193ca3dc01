"""This submodule contains the small helpers."""
import time
from pprint import pformat

__all__ = [
    'name_to_id',
    'EtagCache',
    'not_found_page',
    'split_lines',
    'file_sink',
]

def name_to_id(name):
    """Convert a page name into a page ID.

    Page IDs are currently the page names themselves. Servers once
    expected a lowercased slug (runs of non-word characters collapsed to
    ``_``), but page names now go over the wire unchanged.
    """
    return name

class EtagCache(object):
    """The last ETag seen for each (workspace, page ID).

    Entries are only ever overwritten, never expired.
    """
    def __init__(self):
        """Initialize an empty cache."""
        self._etags = {}

    def __repr__(self):
        """Represent the cache."""
        return '<EtagCache of {} pages>'.format(len(self._etags))

    __str__ = __repr__

    def __len__(self):
        return len(self._etags)

    def __contains__(self, key):
        return key in self._etags

    def record(self, workspace, page_id, etag):
        """Remember ``etag`` (which may be None) for a page."""
        self._etags[(workspace, page_id)] = etag

    def lookup(self, workspace, page_id):
        """Return the remembered ETag for a page, or None."""
        return self._etags.get((workspace, page_id))

def not_found_page():
    """Return the record that stands in for a missing page."""
    return {
        'text': 'Not found',
        'tags': [],
        'modifier': '',
        'modified': '',
        'bag': '',
    }

def split_lines(body):
    """Split a listing body into its non-empty lines, in order."""
    return [line for line in body.split('\n') if line]

def file_sink(path):
    """Return a diagnostics sink that appends dumps to the file at ``path``.

    Each entry is a local timestamp, the label and a pretty-printed dump
    of the data.
    """
    def sink(label, data):
        with open(path, 'a', encoding='utf-8') as logfile:
            logfile.write('{} {}\n{}\n'.format(time.asctime(), label,
                                               pformat(data)))
    return sink
