"""
Assembling a single HTTP request from a Config.
"""
import requests

__all__ = [
    'build_request',
    'USER_COOKIE',
]

USER_COOKIE = 'tiddlyweb_user'

def build_request(config, method, uri, accept=None, content_type=None,
                  content=None, if_match=None):
    #pylint: disable=too-many-arguments
    """Return an unsent ``requests.Request``.

    ``uri`` is the path below the configured server. ``content`` may be
    text (sent as UTF-8) or bytes. PUT requests always carry an explicit
    Content-Length, counted in bytes.
    """
    url = config.base_url() + uri
    headers = {}
    auth = None

    cookies = []
    if config.user_cookie:
        cookies.append(USER_COOKIE + '=' + config.user_cookie)
    elif config.username is not None or config.password is not None:
        auth = (config.username or '', config.password or '')
    if config.cookie:
        cookies.append(config.cookie)
    if cookies:
        headers['Cookie'] = '; '.join(cookies)

    if accept:
        headers['Accept'] = accept
    if content_type:
        headers['Content-Type'] = content_type
    if if_match:
        headers['If-Match'] = if_match
    if config.agent_string:
        headers['User-Agent'] = config.agent_string

    if isinstance(content, str):
        content = content.encode('utf-8')
    if method.upper() == 'PUT':
        headers['Content-Length'] = str(len(content) if content else 0)

    return requests.Request(method, url, headers=headers, auth=auth,
                            data=content or None)
