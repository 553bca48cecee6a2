from .base import DictType


class Port(DictType):
    """
    A single port exposed by a container, keyed the way the Engine API
    reports it in ``GET /containers/json``.

    Args:

        private_port (int): Port inside the container.
        public_port (int): Port published on the host. ``0`` or a value
            equal to ``private_port`` means the port is not remapped.
            Default: ``0``
        type (str): Transport protocol, e.g. ``tcp`` or ``udp``.
            Default: ``tcp``
        ip (str): Host address the port is bound to. Empty when the port
            is not bound to a specific address. Default: ``''``
    """
    def __init__(self, private_port, public_port=0, type='tcp', ip=''):
        super(Port, self).__init__({
            'PrivatePort': private_port,
            'PublicPort': public_port,
            'Type': type,
            'IP': ip,
        })

    @classmethod
    def from_dict(cls, data):
        if isinstance(data, cls):
            return data
        return cls(
            data['PrivatePort'],
            public_port=data.get('PublicPort') or 0,
            type=data.get('Type', 'tcp'),
            ip=data.get('IP') or '',
        )

    @property
    def private_port(self):
        return self['PrivatePort']

    @property
    def public_port(self):
        return self['PublicPort']

    @property
    def type(self):
        return self['Type']

    @property
    def ip(self):
        return self['IP']

    @property
    def is_redirection(self):
        return bool(self.ip) and self.public_port != self.private_port

    def __repr__(self):
        return 'Port({0!r}, public_port={1!r}, type={2!r}, ip={3!r})'.format(
            self.private_port, self.public_port, self.type, self.ip
        )
