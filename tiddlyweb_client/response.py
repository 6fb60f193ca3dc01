"""
Turning HTTP responses into results, or into exceptions.

Each function takes a ``requests.Response`` and either returns what the
operation hands back to its caller or raises ``RequestFailed``.
"""
import json

from .excs import RequestFailed, DecodeError
from .misc import not_found_page, split_lines

__all__ = [
    'decode_json',
    'interpret_page_get',
    'interpret_page_put',
    'interpret_things',
]

def decode_json(body):
    """Decode a JSON response body, raising DecodeError if it is invalid."""
    try:
        return json.loads(body)
    except ValueError as exc:
        raise DecodeError(body, str(exc)) from exc

def _fail(response):
    raise RequestFailed(response.status_code, response.text, response)

def interpret_page_get(response, structured=False):
    """Result of reading a page.

    A missing page is not an error: it yields the raw 404 body, or a
    placeholder record when ``structured``.
    """
    if response.status_code == 200:
        if structured:
            return decode_json(response.text)
        return response.text
    if response.status_code == 404:
        if structured:
            return not_found_page()
        return response.text
    return _fail(response)

def interpret_page_put(response):
    """Result of writing a page: the response body."""
    if response.status_code in (201, 204):
        return response.text
    return _fail(response)

def interpret_things(response, structured=False, as_list=True):
    """Result of a listing or metadata request.

    With ``as_list`` a 200 body becomes its list of non-empty lines;
    otherwise it is returned whole, decoded when ``structured``. 404 is
    an empty result and 302 yields the redirect target.
    """
    status = response.status_code
    if status == 200:
        if as_list:
            return split_lines(response.text)
        if structured:
            return decode_json(response.text)
        return response.text
    if status == 404:
        return [] if as_list else None
    if status == 302:
        return response.headers.get('Location')
    return _fail(response)
