"""
This submodule contains the Page record used for structured writes.
"""
import json

__all__ = [
    'Page',
]

class Page(object):
    """A page to be written as JSON.

    ``content`` is the page text, ``tags`` an ordered list of tag names
    and ``fields`` a dict of extra metadata. If ``bag`` is set, the page
    is written straight into that bag instead of through the workspace.
    """
    def __init__(self, content='', tags=None, fields=None, bag=None):
        """Initialize a page record."""
        self.content = content
        self.tags = list(tags) if tags is not None else []
        self.fields = dict(fields) if fields is not None else {}
        self.bag = bag

    def __repr__(self):
        """Represent a page record."""
        if self.bag:
            return '<Page in bag {bag} tagged {tags}>'.format(bag=self.bag,
                                                             tags=self.tags)
        return '<Page tagged {tags}>'.format(tags=self.tags)

    __str__ = __repr__

    def __eq__(self, other):
        """Check if two page records are the same."""
        if not isinstance(other, Page):
            return NotImplemented
        return (self.content, self.tags, self.fields, self.bag) \
            == (other.content, other.tags, other.fields, other.bag)

    __hash__ = None

    @classmethod
    def from_dict(cls, data):
        """Build a Page from a dict.

        The text may be under ``content`` or, as the server sends it,
        under ``text``.
        """
        if 'content' in data:
            content = data['content']
        else:
            content = data.get('text', '')
        return cls(content, tags=data.get('tags'), fields=data.get('fields'),
                   bag=data.get('bag') or None)

    def to_dict(self):
        """Return the JSON object sent to the server."""
        return {
            'text': self.content,
            'tags': self.tags,
            'fields': self.fields,
        }

    def to_json(self):
        """Return the request body for this page."""
        return json.dumps(self.to_dict())
