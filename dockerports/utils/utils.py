import logging
import os
import re

import requests
from packaging import version as packaging_version

from .. import constants
from .. import errors

log = logging.getLogger(__name__)

# RFC 2045 token: any printable ASCII except tspecials
_TOKEN = r"[!#$%&'*+\-.^_`{|}~0-9A-Za-z]+"
_QUOTED_STRING = r'"((?:[^"\\]|\\.)*)"'
_MEDIA_TYPE_RE = re.compile(r'({0})(?:/({0}))?'.format(_TOKEN))
_MEDIA_PARAM_RE = re.compile(
    r'\s*;\s*({0})\s*=\s*(?:({0})|{1})'.format(_TOKEN, _QUOTED_STRING)
)
_QUOTED_PAIR_RE = re.compile(r'\\(.)')


def compare_version(v1, v2):
    """Compare docker API versions

    >>> v1 = '1.9'
    >>> v2 = '1.10'
    >>> compare_version(v1, v2)
    1
    >>> compare_version(v2, v1)
    -1
    >>> compare_version(v2, v2)
    0
    """
    try:
        s1 = packaging_version.Version(v1)
        s2 = packaging_version.Version(v2)
    except packaging_version.InvalidVersion as e:
        raise errors.InvalidVersion(
            'Invalid API version: {0}'.format(e)
        )
    if s1 == s2:
        return 0
    elif s1 > s2:
        return -1
    else:
        return 1


def version_lt(v1, v2):
    return compare_version(v1, v2) > 0


def version_gte(v1, v2):
    return not version_lt(v1, v2)


def _parse_unix_addr(addr, default_socket):
    if '://' in addr:
        raise errors.InvalidHost(
            "Invalid proto, expected unix: {0}".format(addr)
        )
    if not addr:
        addr = default_socket
    return 'unix://{0}'.format(addr)


def _parse_tcp_addr(addr, default_host):
    if not addr or '://' in addr:
        raise errors.InvalidHost(
            "Invalid proto, expected tcp: {0}".format(addr)
        )
    if '?' in addr or '#' in addr:
        raise errors.InvalidHost(
            "Invalid bind address format: {0}".format(addr)
        )

    netloc, slash, path = addr.partition('/')
    path = (slash + path).rstrip('/')

    if netloc.startswith('['):
        host, bracket, port = netloc[1:].partition(']')
        if not bracket or not host or not port.startswith(':'):
            raise errors.InvalidHost(
                "Invalid bind address format: {0}".format(addr)
            )
        host = '[{0}]'.format(host)
        port = port[1:]
    else:
        host_parts = netloc.split(':')
        if len(host_parts) != 2:
            raise errors.InvalidHost(
                "Invalid bind address format: {0}".format(addr)
            )
        host, port = host_parts

    if not port.isdigit():
        raise errors.InvalidHost(
            "Invalid bind address format: {0}".format(addr)
        )
    if not host:
        host = default_host

    return 'tcp://{0}:{1}{2}'.format(host, int(port), path)


# Based on pkg/parsers:ParseHost from the Docker daemon
def parse_host(addr, default_host=constants.DEFAULT_HTTP_HOST,
               default_socket=constants.DEFAULT_UNIX_SOCKET,
               is_win32=constants.IS_WINDOWS_PLATFORM):
    """
    Normalize a daemon address as given to ``docker -H``.

    Addresses without a scheme are treated as ``tcp``. A ``tcp`` address
    needs a port; its host falls back to ``default_host``. An empty
    ``unix`` address falls back to ``default_socket``. ``fd://`` addresses
    are returned unchanged.

    Raises:
        :py:class:`dockerports.errors.InvalidHost`
            If the address is malformed or uses an unknown scheme.
    """
    addr = (addr or '').strip()
    if not addr:
        if is_win32:
            return 'tcp://{0}:{1}'.format(
                default_host, constants.DEFAULT_HTTP_PORT
            )
        addr = 'unix://{0}'.format(default_socket)

    proto, sep, rest = addr.partition('://')
    if not sep:
        proto, rest = 'tcp', addr

    if proto == 'tcp':
        return _parse_tcp_addr(rest, default_host)
    elif proto == 'unix':
        return _parse_unix_addr(rest, default_socket)
    elif proto == 'fd':
        return addr

    raise errors.InvalidHost(
        "Invalid bind address format: {0}".format(addr)
    )


validate_host = parse_host


def host_from_env(environment=None):
    if not environment:
        environment = os.environ
    # empty string for DOCKER_HOST is the same as unset.
    return parse_host(environment.get('DOCKER_HOST'))


def parse_media_type(value):
    """
    Split a ``Content-Type`` style value into its media type and
    parameters.

    The media type and parameter names are lowercased, quoted parameter
    values are unescaped.

    >>> parse_media_type('Text/HTML; charset="utf-8"')
    ('text/html', {'charset': 'utf-8'})

    Raises:
        ValueError: If the value is empty, the media type is not a valid
            token, or a parameter is malformed or repeated.
    """
    if value is None:
        raise ValueError('no media type')

    base, sep, rest = value.partition(';')
    mimetype = base.strip().lower()
    if not mimetype:
        raise ValueError('no media type')
    if not _MEDIA_TYPE_RE.fullmatch(mimetype):
        raise ValueError('expected token after slash: {0}'.format(mimetype))

    params = {}
    rest = sep + rest
    pos = 0
    while rest[pos:].strip() not in ('', ';'):
        match = _MEDIA_PARAM_RE.match(rest, pos)
        if not match:
            raise ValueError(
                'invalid media parameter: {0}'.format(rest[pos:].strip())
            )
        key = match.group(1).lower()
        if match.group(2) is not None:
            param_value = match.group(2)
        else:
            param_value = _QUOTED_PAIR_RE.sub(r'\1', match.group(3))
        if key in params:
            raise ValueError('duplicate parameter name: {0}'.format(key))
        params[key] = param_value
        pos = match.end()

    return mimetype, params


def matches_content_type(content_type, expected_type):
    """
    Check whether ``content_type`` names ``expected_type``, ignoring any
    parameters such as ``charset``.

    ``content_type`` may be a header value or a :py:class:`requests.Response`,
    in which case its ``Content-Type`` header is used. An unparseable value
    is logged and never matches.
    """
    if isinstance(content_type, requests.Response):
        content_type = content_type.headers.get('Content-Type')
    try:
        mimetype, _ = parse_media_type(content_type)
    except ValueError as e:
        log.error(
            'Error parsing media type: %s error: %s', content_type, e
        )
        return False
    return mimetype == expected_type
