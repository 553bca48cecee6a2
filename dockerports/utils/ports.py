from .. import constants
from ..types.ports import Port


def _as_port(port):
    # Raw Engine API dicts and Port records are read the same way
    return Port.from_dict(port)


def _sort_key(port):
    return port.private_port, port.type, port.ip, port.public_port


def sort_ports(ports):
    """Return ``ports`` as :py:class:`Port` records ordered by private port.

    Records sharing a private port are ordered by type, bind address and
    public port, so the result does not depend on the input order.
    """
    return sorted((_as_port(p) for p in ports), key=_sort_key)


def form_group(key, start, last):
    """Render one contiguous run of ports.

    ``key`` is either a transport type (``tcp``) or a bind address and a
    type joined by ``/`` (``1.2.3.4/tcp``).

    >>> form_group('tcp', 80, 82)
    '80-82/tcp'
    >>> form_group('1.2.3.4/udp', 53, 53)
    '1.2.3.4:53->53/udp'
    """
    ip, _, group_type = key.rpartition(constants.PORT_GROUP_SEPARATOR)
    if start == last:
        group = '{0}'.format(start)
    else:
        group = '{0}-{1}'.format(start, last)
    if ip:
        group = '{0}:{1}->{1}'.format(ip, group)
    return '{0}/{1}'.format(group, group_type)


def _format_redirection(port):
    return '{0}:{1}->{2}/{3}'.format(
        port.ip, port.public_port, port.private_port, port.type
    )


def _group_key(port):
    if not port.ip:
        return port.type
    return constants.PORT_GROUP_SEPARATOR.join((port.ip, port.type))


def displayable_ports(ports):
    """
    Summarize a container's ports the way ``docker ps`` shows them.

    Consecutive private ports sharing a transport type (and bind address,
    when there is one) are merged into a single range. Ports published on
    a bound address under a different host port are listed one by one
    after all the ranges.

    Ports are scanned in private port order; records sharing a private
    port are taken by type, then bind address, then public port. Every
    range of a given type/address appears where that type/address was
    first seen in this order, so ``80/udp`` comes after ``80/tcp``.

    Args:
        ports (iterable): :py:class:`~dockerports.types.Port` records or
            dicts in the Engine API shape (``PrivatePort``, ``PublicPort``,
            ``Type``, ``IP``). They are not modified.

    Returns:
        (str): Comma separated list of port groups, or an empty string.

    Example:

        >>> displayable_ports([
        ...     {'PrivatePort': 80, 'Type': 'tcp'},
        ...     {'PrivatePort': 81, 'Type': 'tcp'},
        ...     {'PrivatePort': 53, 'Type': 'udp'},
        ... ])
        '53/udp, 80-81/tcp'
    """
    result = []
    host_mappings = []
    # key -> (closed runs, open [first, last]); insertion order is the
    # order keys were first seen
    groups = {}

    for port in sort_ports(ports):
        current = port.private_port
        if port.is_redirection:
            host_mappings.append(_format_redirection(port))
            continue

        key = _group_key(port)
        if key not in groups:
            groups[key] = ([], [current, current])
            continue

        closed, group = groups[key]
        if current == group[1] + 1:
            group[1] = current
        else:
            closed.append(form_group(key, *group))
            group[:] = [current, current]

    for key, (closed, (first, last)) in groups.items():
        result.extend(closed)
        result.append(form_group(key, first, last))
    result.extend(host_mappings)
    return constants.PORT_TOKEN_SEPARATOR.join(result)


format_port_ranges = displayable_ports
